from lis.reader.parser import lex, classify, TokenStream, parse, parse_all

__all__ = ["lex", "classify", "TokenStream", "parse", "parse_all"]
