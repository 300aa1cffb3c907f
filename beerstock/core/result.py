# beerstock/core/result.py

"""
서비스 계층의 성공/실패 결과를 표현하는 태그드 유니온 타입입니다.

서비스는 비즈니스 규칙 위반을 예외로 던지지 않고 `Err`로 감싸서 반환하며,
호출자(라우터)는 `isinstance` 또는 `is_ok()`로 분기합니다.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        """감싼 오류를 예외로 발생시킵니다."""
        raise self.error


Result = Union[Ok[T], Err[E]]
