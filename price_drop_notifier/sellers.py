"""Seller table: display name, product page and price rule per seller."""

import re
from dataclasses import dataclass

from price_drop_notifier.models import Seller

# Magento-style product JSON: prefer the discounted price when present.
MAGENTO_PRICE_RULE = (
    re.compile(r'"special_price":(.*?),'),
    re.compile(r'"price":(.*?),'),
)
# Shopify-style money object.
SHOPIFY_PRICE_RULE = (re.compile(r'"amount":(.*?),'),)


@dataclass(frozen=True)
class SellerConfig:
    seller: Seller
    display_name: str
    url: str
    price_rule: tuple[re.Pattern, ...]


SELLERS: dict[Seller, SellerConfig] = {
    Seller.IBOX: SellerConfig(
        seller=Seller.IBOX,
        display_name="iBox",
        url="https://ibox.co.id/product/14-inch-macbook-pro-m3-pro-s8100128517",
        price_rule=MAGENTO_PRICE_RULE,
    ),
    Seller.DIGIMAP: SellerConfig(
        seller=Seller.DIGIMAP,
        display_name="Digimap",
        url="https://www.digimap.co.id/products/14-inch-macbook-pro-m3-pro-mrx63id-a",
        price_rule=SHOPIFY_PRICE_RULE,
    ),
    Seller.ERASPACE: SellerConfig(
        seller=Seller.ERASPACE,
        display_name="Eraspace",
        url="https://eraspace.com/eraspace/produk/apple-macbook-pro-m3-pro--m3-max-14-inci-2024",
        price_rule=MAGENTO_PRICE_RULE,
    ),
}


def display_name(seller: Seller) -> str:
    return SELLERS[seller].display_name
