from __future__ import annotations

ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"


class ArabicNumberPrinter:
    """
    يحول الأرقام اللاتينية إلى أرقام عربية هندية (٠١٢٣...) بدون فاصل آلاف.

    Built once at import and shared; holds nothing but its translation table.
    """

    __slots__ = ("_table",)

    def __init__(self) -> None:
        self._table = str.maketrans("0123456789", ARABIC_INDIC_DIGITS)

    def digits(self, text: str) -> str:
        return str(text).translate(self._table)

    def number(self, value: int, width: int = 0) -> str:
        return self.digits(f"{int(value):0{width}d}")


printer = ArabicNumberPrinter()
