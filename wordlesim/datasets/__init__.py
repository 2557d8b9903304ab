from .io import load_answers, load_dictionary, parse_answers, parse_dictionary

__all__ = ["load_answers", "load_dictionary", "parse_answers", "parse_dictionary"]
