# beerstock/domains/beer/exceptions.py

"""
'beer' 도메인의 비즈니스 오류 분류입니다.
서비스는 이 오류들을 발생시키지 않고 Err 결과로 감싸 반환합니다.
"""

from fastapi import status


class BeerStockError(Exception):
    """재고 도메인 오류의 기본 클래스."""
    error: str = "Bad Request"
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.error, "message": self.message}


class BeerNotFoundError(BeerStockError):
    error = "Not Found"
    status_code = status.HTTP_404_NOT_FOUND

    @classmethod
    def for_id(cls, beer_id: int) -> "BeerNotFoundError":
        return cls(f"Beer with id '{beer_id}' not found.")

    @classmethod
    def for_name(cls, name: str) -> "BeerNotFoundError":
        return cls(f"Beer with name '{name}' not found.")


class BeerAlreadyRegisteredError(BeerStockError):
    error = "Conflict"
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Beer with name '{name}' is already registered.")


class InvalidStockError(BeerStockError):
    """수량이 [0, capacity] 범위를 벗어나는 경우."""
    error = "Invalid Stock"

    @classmethod
    def negative(cls) -> "InvalidStockError":
        return cls("Stock quantity cannot be negative.")

    @classmethod
    def exceeded(cls, quantity: int, max_quantity: int) -> "InvalidStockError":
        return cls(f"Quantity {quantity} exceeds max stock of {max_quantity}.")


class InvalidAmountError(BeerStockError):
    """증가/감소 수량이 0 이하인 경우."""
    error = "Invalid Amount"

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation.capitalize()} quantity must be greater than zero.")


class InsufficientStockError(BeerStockError):
    error = "Insufficient Stock"

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(f"Cannot remove {requested} units. Only {available} available.")
