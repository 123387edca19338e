"""Factory for creating transcript formatters."""

from .base import BaseFormatter
from .json_formatter import JSONFormatter
from .text_formatter import TextFormatter


class FormatterFactory:
    """Factory for creating formatters."""

    @staticmethod
    def create_formatter(formatter_type: str = "json", **kwargs) -> BaseFormatter:
        """
        Create a formatter instance based on type.

        Args:
            formatter_type: 'json' or 'text'
            **kwargs: Additional arguments to pass to the formatter constructor

        Returns:
            A BaseFormatter implementation

        Raises:
            ValueError: If formatter_type is not supported
        """
        name = formatter_type.lower()
        if name == "json":
            return JSONFormatter(**kwargs)
        elif name == "text":
            kwargs.pop("pretty_print", None)
            return TextFormatter(**kwargs)
        else:
            raise ValueError(f"Unsupported formatter type: {formatter_type}")
