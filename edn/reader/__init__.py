from edn.reader.parser import Reader, EOF, EOFType, read_string, read_all

__all__ = ["Reader", "EOF", "EOFType", "read_string", "read_all"]
