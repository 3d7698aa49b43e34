"""Small tools: Pig strategy simulation, line/word/byte counting and number filters."""

__version__ = "0.1.0"
__all__ = ["numfilter", "pig", "wordcount"]