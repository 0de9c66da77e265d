"""
core.py — Domain Primitive per numeri romani

================================================================================
DESIGN PRINCIPLES
================================================================================

1. DOPPIA RAPPRESENTAZIONE
   Ogni RomanNumeral contiene un intero (decimal) e una stringa (numeral).
   Le due rappresentazioni sono SEMPRE calcolate insieme: non esiste un modo
   di impostarne una senza ricalcolare l'altra.

2. RANGE VERIFICATO
   Costruire da un intero (o da un risultato aritmetico) verifica 0..3999.
   Costruire da una stringa è tollerante: "IIII" è accettato e vale 4.

3. UGUAGLIANZA SUL VALORE
   RomanNumeral("IV") == RomanNumeral("IIII"). Conta solo decimal.
   hash(x) == x.decimal, quindi utilizzabile in set e come chiave di dict.

4. ARITMETICA SENZA SIDE EFFECT
   add/subtract/sum/difference restituiscono SEMPRE una nuova istanza.
   L'unica mutazione possibile passa dai setter espliciti.

================================================================================
"""

from __future__ import annotations
from typing import Any, Iterable, Optional, Union

from .conversion import (
    MAX_DECIMAL,
    MIN_DECIMAL,
    decimal_to_numeral,
    numeral_to_decimal,
)


# Operandi accettati dall'aritmetica
Operand = Union["RomanNumeral", int, str]


# ==============================================================================
# ROMAN NUMERAL CLASS
# ==============================================================================

class RomanNumeral:
    """
    Domain Primitive per numeri romani in forma standard.

    INVARIANTI:
    1. _numeral e _decimal vengono sempre assegnati insieme
    2. Da intero: 0 <= _decimal <= 3999, _numeral canonico (sottrattivo)
    3. Da stringa: _numeral conservato così com'è, _decimal decodificato
    4. Uguaglianza e hash dipendono solo da _decimal

    USAGE:
        four = RomanNumeral(4)          # 'IV'
        also_four = RomanNumeral("IIII")
        assert four == also_four
        assert (four + 5).numeral == "IX"
    """

    __slots__ = ("_decimal", "_numeral")

    MIN_DECIMAL: int = MIN_DECIMAL
    MAX_DECIMAL: int = MAX_DECIMAL

    def __init__(self, value: Optional[Union[RomanNumeral, int, str]] = None):
        """
        Costruttore polimorfico:
        - nessun argomento -> zero (stringa vuota)
        - RomanNumeral     -> copia verbatim
        - int              -> da decimale (range verificato)
        - str              -> da stringa (decodifica tollerante)
        """
        self._decimal = 0
        self._numeral = ""

        if value is None:
            return
        if isinstance(value, RomanNumeral):
            self._decimal = value._decimal
            self._numeral = value._numeral
        elif isinstance(value, bool):
            raise TypeError("RomanNumeral non accetta bool")
        elif isinstance(value, int):
            self.set_decimal(value)
        elif isinstance(value, str):
            self.set_numeral(value)
        else:
            raise TypeError(
                f"RomanNumeral si costruisce da int, str o RomanNumeral, "
                f"non da {type(value).__name__}"
            )

    # -------------------------------------------------------------------------
    # Costruttori
    # -------------------------------------------------------------------------

    @classmethod
    def from_decimal(cls, decimal: int) -> RomanNumeral:
        """Da intero 0..3999. Solleva OutOfRangeError fuori range."""
        result = cls()
        result.set_decimal(decimal)
        return result

    @classmethod
    def from_numeral(cls, numeral: str) -> RomanNumeral:
        """
        Da stringa romana. Solleva InvalidSymbolError per simboli non validi.

        NOTA: nessun controllo di range dopo la decodifica,
        "MMMMM" produce decimal == 5000.
        """
        result = cls()
        result.set_numeral(numeral)
        return result

    @classmethod
    def copy_of(cls, other: RomanNumeral) -> RomanNumeral:
        """Copia verbatim di entrambi i campi (nessun ricalcolo)."""
        if not isinstance(other, RomanNumeral):
            raise TypeError(f"Impossibile copiare {type(other).__name__}")
        return cls(other)

    @classmethod
    def zero(cls) -> RomanNumeral:
        """Zero. Utile come valore iniziale per accumuli."""
        return cls()

    def copy(self) -> RomanNumeral:
        return RomanNumeral(self)

    # -------------------------------------------------------------------------
    # Setter e accessori
    # -------------------------------------------------------------------------

    def set_decimal(self, decimal: int) -> None:
        """
        Sostituisce il valore partendo da un intero.
        Se la conversione fallisce l'istanza resta invariata.
        """
        numeral = decimal_to_numeral(decimal)
        self._decimal = decimal
        self._numeral = numeral

    def set_numeral(self, numeral: str) -> None:
        """
        Sostituisce il valore partendo da una stringa romana.
        Se la decodifica fallisce l'istanza resta invariata.
        """
        decimal = numeral_to_decimal(numeral)
        self._decimal = decimal
        self._numeral = numeral

    @property
    def decimal(self) -> int:
        """Valore intero."""
        return self._decimal

    @property
    def numeral(self) -> str:
        """Stringa romana memorizzata."""
        return self._numeral

    def is_zero(self) -> bool:
        return self._decimal == 0

    def __int__(self) -> int:
        return self._decimal

    def __bool__(self) -> bool:
        return self._decimal != 0

    # -------------------------------------------------------------------------
    # Aritmetica
    # -------------------------------------------------------------------------

    def add(self, addend: Union[Operand, Iterable[Operand]]) -> RomanNumeral:
        """
        Somma e restituisce un nuovo RomanNumeral.

        addend può essere RomanNumeral, int (anche negativo), str romana,
        oppure un iterabile di questi (vengono sommati tutti).

        Raises:
            OutOfRangeError: se il risultato esce da 0..3999
            InvalidSymbolError: se una stringa contiene simboli non validi
            TypeError: per operandi di tipo non supportato
        """
        return RomanNumeral.from_decimal(self._decimal + _total_of(addend))

    def subtract(self, subtrahend: Union[Operand, Iterable[Operand]]) -> RomanNumeral:
        """
        Sottrae e restituisce un nuovo RomanNumeral.
        Stessi operandi e stessi errori di add().
        """
        return RomanNumeral.from_decimal(self._decimal - _total_of(subtrahend))

    @staticmethod
    def sum(*addends: Union[Operand, Iterable[Operand]]) -> RomanNumeral:
        """
        Somma senza ricevente implicito.

            RomanNumeral.sum(a, b)
            RomanNumeral.sum([a, b, c])
            RomanNumeral.sum(a, b, c)

        Nessun operando (o iterabile vuoto) -> zero.
        """
        total = 0
        for addend in addends:
            total += _total_of(addend)
        return RomanNumeral.from_decimal(total)

    @staticmethod
    def difference(
        minuend: Operand,
        subtrahends: Union[Operand, Iterable[Operand]],
    ) -> RomanNumeral:
        """
        minuend meno uno o più sottraendi.

            RomanNumeral.difference(a, b)
            RomanNumeral.difference(a, [b, c, d])
        """
        return RomanNumeral.from_decimal(
            _operand_decimal(minuend) - _total_of(subtrahends)
        )

    def __add__(self, other: Any) -> RomanNumeral:
        if not _is_scalar_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> RomanNumeral:
        # Permette sum([...]) con start=0
        if not _is_scalar_operand(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> RomanNumeral:
        if not _is_scalar_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> RomanNumeral:
        if not _is_scalar_operand(other):
            return NotImplemented
        return RomanNumeral.difference(other, self)

    # -------------------------------------------------------------------------
    # Comparazione
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, RomanNumeral):
            return self._decimal == other._decimal
        return NotImplemented

    def __hash__(self) -> int:
        return self._decimal

    def __lt__(self, other: RomanNumeral) -> bool:
        self._check_comparable(other)
        return self._decimal < other._decimal

    def __le__(self, other: RomanNumeral) -> bool:
        self._check_comparable(other)
        return self._decimal <= other._decimal

    def __gt__(self, other: RomanNumeral) -> bool:
        self._check_comparable(other)
        return self._decimal > other._decimal

    def __ge__(self, other: RomanNumeral) -> bool:
        self._check_comparable(other)
        return self._decimal >= other._decimal

    def _check_comparable(self, other: Any) -> None:
        if not isinstance(other, RomanNumeral):
            raise TypeError(
                f"Impossibile comparare RomanNumeral con {type(other).__name__}"
            )

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self._numeral

    def __repr__(self) -> str:
        return f"RomanNumeral({self._numeral!r})"

    # -------------------------------------------------------------------------
    # Serializzazione
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """
        Serializza per persistenza/API.

        Formato: {"decimal": int, "numeral": str}
        """
        return {
            "decimal": self._decimal,
            "numeral": self._numeral,
        }

    @classmethod
    def from_dict(cls, data: dict) -> RomanNumeral:
        """
        Deserializza da dict.

        Se presente "numeral" ha la precedenza (conserva la grafia originale).
        Se sono presenti entrambi devono concordare.
        """
        if "numeral" in data:
            result = cls.from_numeral(data["numeral"])
            if "decimal" in data and data["decimal"] != result._decimal:
                raise ValueError(
                    f"Dati incoerenti: numeral {result._numeral!r} vale "
                    f"{result._decimal}, non {data['decimal']}"
                )
            return result
        if "decimal" in data:
            return cls.from_decimal(data["decimal"])
        raise ValueError("Il dict deve contenere 'numeral' o 'decimal'")


# ==============================================================================
# OPERAND HELPERS
# ==============================================================================

def _is_scalar_operand(value: Any) -> bool:
    return isinstance(value, (RomanNumeral, int, str)) and not isinstance(value, bool)


def _operand_decimal(value: Any) -> int:
    """Valore intero di un singolo operando."""
    if isinstance(value, RomanNumeral):
        return value._decimal
    if isinstance(value, bool):
        raise TypeError("Operazione non permessa con bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return numeral_to_decimal(value)
    raise TypeError(
        f"Operazione non permessa: RomanNumeral con {type(value).__name__}. "
        f"Usa RomanNumeral, int o str."
    )


def _total_of(value: Any) -> int:
    """Un operando singolo oppure la somma di un iterabile di operandi."""
    if _is_scalar_operand(value):
        return _operand_decimal(value)
    try:
        items = iter(value)
    except TypeError:
        raise TypeError(
            f"Operazione non permessa: RomanNumeral con {type(value).__name__}. "
            f"Usa RomanNumeral, int, str o un iterabile di questi."
        ) from None
    return sum(_operand_decimal(item) for item in items)
