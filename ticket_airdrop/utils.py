"""
Utility functions for ticket amounts and digit chunks
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Union

from .errors import MalformedInputError

PRECISION = 5
FIVE_PLACES = Decimal('0.00001')


class Utils:
    """Helper utilities shared by the leaderboard and lottery stages"""

    @staticmethod
    def human_readable(amount: int, precision: int = PRECISION) -> Decimal:
        """
        Convert an integer amount in the smallest unit to human units.

        Args:
            amount: Amount in satoshi-like units
            precision: Asset precision (default: 5)

        Returns:
            Decimal rounded to five places

        Example:
            >>> Utils.human_readable(2500000)
            Decimal('25.00000')
        """
        return Utils.round5(Decimal(amount) / (Decimal(10) ** precision))

    @staticmethod
    def round5(value: Union[Decimal, int, str]) -> Decimal:
        """Round half-up to five decimal places."""
        return Decimal(value).quantize(FIVE_PLACES, rounding=ROUND_HALF_UP)

    @staticmethod
    def round_int(value: Decimal) -> int:
        """Round half-up to the nearest integer."""
        return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))

    @staticmethod
    def chunk(stream: str, width: int) -> List[str]:
        """
        Slice a digit stream into consecutive chunks of a fixed width.

        A trailing piece shorter than ``width`` is discarded.

        Args:
            stream: Digit stream
            width: Chunk width

        Returns:
            List of chunk strings

        Example:
            >>> Utils.chunk("1234567890", 3)
            ['123', '456', '789']
        """
        if width <= 0:
            raise ValueError(f"chunk width must be positive, got {width}")
        chunks = [stream[i:i + width] for i in range(0, len(stream), width)]
        return [c for c in chunks if len(c) == width]

    @staticmethod
    def parse_chunk(text: str) -> int:
        """
        Parse a zero-padded chunk as a base 10 integer.

        Leading zeros are skipped before parsing; an all-zero chunk is 0.

        Args:
            text: Chunk of decimal digits

        Returns:
            Parsed integer

        Raises:
            MalformedInputError: If the chunk holds anything but ASCII digits
        """
        if not text or not all('0' <= c <= '9' for c in text):
            raise MalformedInputError(f"chunk is not a digit string: {text!r}")
        for position, digit in enumerate(text):
            if digit != '0':
                return int(text[position:])
        return 0

    @staticmethod
    def reverse_chunk(text: str) -> str:
        """Reverse the digit order of a chunk."""
        return text[::-1]

    @staticmethod
    def format_amount(amount: Decimal) -> str:
        """
        Format a five place Decimal for JSON output.

        Args:
            amount: Decimal amount

        Returns:
            Fixed-point string with exactly five decimals

        Example:
            >>> Utils.format_amount(Decimal('123456789012.345674'))
            '123456789012.34567'
        """
        return f"{Utils.round5(amount):f}"
