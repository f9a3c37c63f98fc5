from ga_tracker.hit import EcommerceInfo, EcommerceItem, PageviewInfo


class HitTestMixin:
    TRACKING_ID = "UA-1-1"
    CLIENT_ID = "1.2"
    TRANSACTION_ID = "transaction_id"
    CURRENCY_CODE = "EUR"
    TITLE = "Home"
    SLUG = "/home"

    def setup_method(self) -> None:
        self.defaults = {"v": 1, "tid": self.TRACKING_ID, "cid": self.CLIENT_ID}
        self.pageview_info = PageviewInfo(title=self.TITLE, slug=self.SLUG)
        self.ecommerce_item = EcommerceItem(
            name="Blue Shirt", price=12.5, quantity=2, sku="SKU-1"
        )
        self.ecommerce_info = EcommerceInfo(
            currency_code=self.CURRENCY_CODE, price=25.0, items=(self.ecommerce_item,)
        )
