from shop_api.exceptions import BusinessRuleViolation


class StockLimitExceeded(BusinessRuleViolation):
    default_detail = "Stock limit exceeded"
    default_code = "stock_limit_exceeded"


class ReductionExceedsQuantity(BusinessRuleViolation):
    default_detail = "You cannot reduce more than the quantity in your cart!"
    default_code = "reduction_exceeds_quantity"


class QuantityMustBePositive(BusinessRuleViolation):
    default_detail = "Product never added before, quantity must be greater than zero!"
    default_code = "quantity_must_be_positive"
