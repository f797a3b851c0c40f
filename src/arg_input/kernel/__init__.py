from .chained_reader import ChainedReader

__all__ = ["ChainedReader"]
