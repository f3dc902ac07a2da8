from purchases.handlers.views import PurchaseView, QuoteView

__all__ = ["PurchaseView", "QuoteView"]
