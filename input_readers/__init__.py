from .csv_text import decode_csv_bytes, read_csv_text, tokenize_line
from .excel import read_excel
from .image import load_pixels

__all__ = ["decode_csv_bytes", "load_pixels", "read_csv_text", "read_excel", "tokenize_line"]
