"""Conversion of committed form text to numbers (SRP: text <-> number only)"""
import math
import re
from typing import Dict, Iterable, Mapping, Optional, Union

from interpgrid.core.enums import FieldKind, FieldName, FIELD_KINDS

Number = Union[int, float]

_NUMBER_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def _ends_in_mantissa(chars) -> bool:
    """Check whether typed text so far ends in a mantissa ("1", "1.")"""
    if chars and chars[-1].isdigit():
        return True
    return len(chars) >= 2 and chars[-1] == "." and chars[-2].isdigit()


class FieldCoercion:
    """
    Parses field text into integers or reals.

    Malformed or empty text is reported as missing (None), never raised;
    callers decide whether a missing value is acceptable.
    """

    @staticmethod
    def coerce(text: Optional[str], kind: FieldKind) -> Optional[Number]:
        """
        Parse a single field value.

        Args:
            text: Raw committed text
            kind: Target numeric kind

        Returns:
            Parsed number, or None if the text is empty or unparseable.
            Integer fields truncate real-valued entries toward zero.
        """
        if text is None:
            return None

        text = text.strip()
        if not text or not _NUMBER_PATTERN.match(text):
            return None

        value = float(text)
        if not math.isfinite(value):
            return None

        if kind == FieldKind.INTEGER:
            return int(value)
        return value

    @classmethod
    def coerce_fields(
        cls,
        values: Mapping[FieldName, str],
        fields: Iterable[FieldName]
    ) -> Dict[FieldName, Optional[Number]]:
        """
        Parse a group of fields using each field's kind.

        Args:
            values: Field text keyed by field name (absent fields count as empty)
            fields: Fields to parse

        Returns:
            Dict of field name to parsed number or None
        """
        return {
            field: cls.coerce(values.get(field, ""), FIELD_KINDS[field])
            for field in fields
        }

    @staticmethod
    def sanitize(text: str, kind: FieldKind) -> str:
        """
        Strip characters that cannot belong to a number of the given kind.

        Meant to be called by the presentation layer on every edit, so the
        text may legitimately be an incomplete number such as "-" or "1e".

        Args:
            text: Text as currently typed
            kind: Numeric kind of the field

        Returns:
            Filtered text
        """
        result = []
        seen_point = False
        seen_exponent = False

        for char in text:
            previous = result[-1] if result else ""

            if char.isdigit():
                result.append(char)
            elif char in "+-":
                # Sign only at the start or right after the exponent marker
                if not result and char == "-":
                    result.append(char)
                elif kind == FieldKind.REAL and previous in ("e", "E"):
                    result.append(char)
            elif kind == FieldKind.INTEGER:
                continue
            elif char == "." and not seen_point and not seen_exponent:
                seen_point = True
                result.append(char)
            elif char in "eE" and not seen_exponent and _ends_in_mantissa(result):
                seen_exponent = True
                result.append(char)

        return "".join(result)

    @staticmethod
    def format_value(value: Optional[Number]) -> str:
        """
        Render a number as field text.

        Args:
            value: Number to render

        Returns:
            "" for None, integral values without a decimal point,
            otherwise the shortest round-tripping representation
        """
        if value is None:
            return ""
        value = float(value)
        if value.is_integer():
            return str(int(value))
        return repr(value)
