# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Random strings from a configurable character pool."""

import threading
from typing import Callable, Optional

from .errors import CryptError, InvalidParameter, RandomSourceUnavailable

DEFAULT_CHARACTERS = (
    "!\"#$%&'()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "[\\]^_`abcdefghijklmnopqrstuvwxyz{|}~"
)
DEFAULT_LENGTH = 64

RandomInt = Callable[[int, int], int]


def _check_pool(characters: str) -> str:
    if not isinstance(characters, str):
        raise InvalidParameter(
            f"Characters must be a string: {characters!r}", value=characters
        )
    if characters == "":
        raise InvalidParameter(
            "Characters cannot be empty", value=characters, bound=1
        )
    return characters


class RandomStringGenerator:
    """Fixed-length random strings drawn from a character pool.

    Parameters
    ----------
    random_int : RandomInt
        A cryptographically secure ``(minimum, maximum) -> int`` source,
        both bounds inclusive.
    characters : str, optional
        The initial pool, by default the 94 printable ASCII characters
        (space excluded).
    """

    def __init__(
        self, random_int: RandomInt, characters: str = DEFAULT_CHARACTERS
    ) -> None:
        self._random_int = random_int
        self._characters = _check_pool(characters)
        self._lock = threading.Lock()

    def get_character_pool(self) -> str:
        """Get the character pool.

        Returns
        -------
        str
            The current pool.
        """
        with self._lock:
            return self._characters

    def set_character_pool(self, characters: str) -> None:
        """Replace the character pool.

        Parameters
        ----------
        characters : str
            The new pool.

        Raises
        ------
        InvalidParameter
            If the pool is empty.
        """
        characters = _check_pool(characters)
        with self._lock:
            self._characters = characters

    def generate(
        self, length: int = DEFAULT_LENGTH, characters: Optional[str] = None
    ) -> str:
        """Generate a random string.

        Parameters
        ----------
        length : int, optional
            The number of characters, by default 64.
        characters : Optional[str], optional
            A pool to use for this call only. The configured pool is
            left untouched.

        Returns
        -------
        str
            The random string, exactly ``length`` characters long.

        Raises
        ------
        InvalidParameter
            If the pool is empty or the length is negative.
        RandomSourceUnavailable
            If the secure random source fails.
        """
        if isinstance(length, bool) or not isinstance(length, int):
            raise InvalidParameter(
                f"Length must be an integer: {length!r}", value=length
            )
        if length < 0:
            raise InvalidParameter(
                f"Length cannot be negative: {length}", value=length, bound=0
            )
        if characters is None:
            pool = self.get_character_pool()
        else:
            pool = _check_pool(characters)
        return self._generate(length, pool)

    def _generate(self, length: int, pool: str) -> str:
        last = len(pool) - 1
        try:
            return "".join(
                pool[self._random_int(0, last)] for _ in range(length)
            )
        except CryptError:
            raise
        except Exception as exc:
            raise RandomSourceUnavailable(str(exc)) from exc


__all__ = ["RandomStringGenerator", "DEFAULT_CHARACTERS", "DEFAULT_LENGTH"]
