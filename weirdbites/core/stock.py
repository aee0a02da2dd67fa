import enum


# Stock at or below this is shown as "low stock"
LOW_STOCK_THRESHOLD = 5

OUT_OF_STOCK_MESSAGE = "Out of stock"


class StockStatus(str, enum.Enum):
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"


def get_stock_status(stock: int) -> StockStatus:
    if stock <= 0:
        return StockStatus.OUT_OF_STOCK
    if stock <= LOW_STOCK_THRESHOLD:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


def is_stock_available(stock: int) -> bool:
    return stock > 0


def get_stock_message(stock: int) -> str:
    """
    Human readable stock label.

    get_stock_message(100) -> "100 in stock"
    get_stock_message(3)   -> "Only 3 left"
    get_stock_message(0)   -> "Out of stock"
    """
    if stock <= 0:
        return OUT_OF_STOCK_MESSAGE
    if stock <= LOW_STOCK_THRESHOLD:
        return f"Only {stock} left"
    return f"{stock} in stock"
