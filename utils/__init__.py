# Utils package - gateway, parser and response shaping

from .openrouter_client import RoastGateway, extract_completion_text
from .roast_parser import parse_roast
from .presentation import build_roast_response, is_pro

__all__ = [
    "RoastGateway",
    "extract_completion_text",
    "parse_roast",
    "build_roast_response",
    "is_pro",
]
