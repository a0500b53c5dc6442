from kappa.reader.parser import Reader, read_all

__all__ = ["Reader", "read_all"]
