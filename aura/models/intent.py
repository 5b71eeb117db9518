"""
Intent resolution results.

The resolver answers with exactly one of two shapes: an Answer carrying
text, or NoLocalMatch meaning "the structured data can't answer this".
NoLocalMatch is not an error; it tells the caller to try the generative
fallback.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Answer:
    text: str


@dataclass(frozen=True)
class NoLocalMatch:
    pass


Resolution = Union[Answer, NoLocalMatch]
