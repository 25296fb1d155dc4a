from minilisp.reader.lexer import Token, lex
from minilisp.reader.parser import parse_tokens, parse_program

__all__ = ["Token", "lex", "parse_tokens", "parse_program"]
