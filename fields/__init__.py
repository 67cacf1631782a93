from .normalization import is_blank, parse_leading_int, parse_quantity, to_quantity, to_text

__all__ = ["is_blank", "parse_leading_int", "parse_quantity", "to_quantity", "to_text"]
