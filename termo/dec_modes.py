"""DEC Private Modes used by termo."""
# std imports
from typing import Dict, Tuple


class DecPrivateMode(int):
    """
    A DEC Private Mode number, with a short name and description.

    Known modes are available as class attributes, such as
    :attr:`DecPrivateMode.DECTCEM`. Any other integer may be wrapped, in
    which case :attr:`name` is ``'UNKNOWN'``::

        >>> DecPrivateMode(1003).name
        'MOUSE_ALL_MOTION'
        >>> DecPrivateMode(99999)
        UNKNOWN(99999)
    """

    #: Mapping of mode number to (name, description).
    _KNOWN: Dict[int, Tuple[str, str]] = {
        25: ('DECTCEM', 'Text Cursor Enable Mode'),
        1003: ('MOUSE_ALL_MOTION', 'Use All Motion Mouse Tracking'),
    }

    DECTCEM: 'DecPrivateMode'
    MOUSE_ALL_MOTION: 'DecPrivateMode'

    @property
    def value(self) -> int:
        """Integer value of this mode."""
        return int(self)

    @property
    def name(self) -> str:
        """Short name of this mode, or ``'UNKNOWN'``."""
        return self._KNOWN.get(int(self), ('UNKNOWN', ''))[0]

    @property
    def long_description(self) -> str:
        """Description of this mode, or ``'Unknown mode'``."""
        return self._KNOWN.get(int(self), ('', 'Unknown mode'))[1]

    def __repr__(self) -> str:
        return f'{self.name}({int(self)})'

    __str__ = __repr__


for _value, (_name, _) in DecPrivateMode._KNOWN.items():  # pylint: disable=protected-access
    setattr(DecPrivateMode, _name, DecPrivateMode(_value))
del _value, _name
