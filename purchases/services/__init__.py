from purchases.services.factory import build_purchase_service
from purchases.services.purchase_service import MAX_TICKETS_PER_PURCHASE, TicketPurchaseService

__all__ = ["TicketPurchaseService", "MAX_TICKETS_PER_PURCHASE", "build_purchase_service"]
