# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/10/12 20:41:07
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

T = TypeVar('T')


class SerializedComponents(Generic[T], metaclass=ABCMeta):
    """Forward-only view over a sequence, one element at a time."""

    @abstractmethod
    def reset_seek(self) -> None:
        raise NotImplementedError

    @property
    @abstractmethod
    def seekable(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def advance(self) -> None:
        raise NotImplementedError

    @property
    @abstractmethod
    def current(self) -> T:
        raise NotImplementedError

    @property
    @abstractmethod
    def eof(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError


class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str) -> None:
        self._fn = filename

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
