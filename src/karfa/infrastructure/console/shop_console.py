"""Interactive shop procedures.

Each public method is one user-facing operation: prompt, validate via the
application handler, print.  A DomainException ends the operation with
its message on the error channel; nothing propagates to the caller.
"""

from __future__ import annotations

import logging

from karfa.application.add_product import AddProductHandler
from karfa.application.add_to_cart import AddToCartHandler
from karfa.application.checkout import CheckoutHandler
from karfa.application.formatting import format_product_line
from karfa.application.list_products import ListProductsHandler
from karfa.application.shop import Shop
from karfa.application.show_cart import ShowCartHandler
from karfa.domain.exceptions import DomainException
from karfa.infrastructure.console.io import InputProvider, OutputSink

logger = logging.getLogger(__name__)

MENU = (
    "1. Bæta við vöru\n"
    "2. Sýna vörur\n"
    "3. Bæta vöru í körfu\n"
    "4. Sýna körfu\n"
    "5. Klára kaup\n"
    "0. Hætta"
)


class ShopConsole:

    def __init__(self, shop: Shop, inp: InputProvider, out: OutputSink) -> None:
        self._shop = shop
        self._in = inp
        self._out = out

    # --- Operations -----------------------------------------------------------

    def add_product(self) -> None:
        handler = AddProductHandler(self._shop.catalog)
        try:
            title = self._in.ask("Titill:")
            handler.check_title(title)
            description = self._in.ask("Lýsing:")
            handler.check_description(description)
            price_text = self._in.ask("Verð:")
            product = handler.handle(title, description, price_text)
        except DomainException as exc:
            self._fail(exc)
            return
        self._out.info(f"Vöru bætt við:\n{format_product_line(product)}")

    def list_products(self) -> None:
        lines = ListProductsHandler(self._shop.catalog).handle()
        if not lines:
            self._out.info("Engar vörur.")
            return
        self._out.info("\n".join(lines))

    def add_product_to_cart(self) -> None:
        handler = AddToCartHandler(self._shop.catalog, self._shop.cart)

        id_text = self._in.ask("Sláðu inn auðkenni (ID) á vöru sem þú vilt bæta í körfu:")
        if not id_text:
            return
        try:
            handler.check_product_id(id_text)
        except DomainException as exc:
            self._fail(exc)
            return

        quantity_text = self._in.ask("Sláðu inn fjölda sem þú vilt bæta í körfu:")
        if not quantity_text:
            return
        try:
            result = handler.handle(id_text, quantity_text)
        except DomainException as exc:
            self._fail(exc)
            return

        heading = "Vöru fjöldi uppfærður:" if result.merged else "Vöru bætt við körfu:"
        self._out.info(f"{heading}\n{result.display}")

    def show_cart(self) -> None:
        self._out.info(ShowCartHandler(self._shop.cart).handle())

    def checkout(self) -> None:
        handler = CheckoutHandler(self._shop.cart)
        try:
            handler.ensure_ready()
            name = self._in.ask("Nafn:")
            handler.check_name(name)
            address = self._in.ask("Heimilisfang:")
            receipt = handler.handle(name, address)
        except DomainException as exc:
            self._fail(exc)
            return
        self._out.info(receipt)

    # --- Menu loop ------------------------------------------------------------

    def run(self) -> None:
        """Show the menu until the user quits or declines to answer."""
        actions = {
            "1": self.add_product,
            "2": self.list_products,
            "3": self.add_product_to_cart,
            "4": self.show_cart,
            "5": self.checkout,
        }
        while True:
            self._out.info(MENU)
            choice = self._in.ask("Veldu aðgerð:")
            if choice is None or choice.strip() == "0":
                return
            action = actions.get(choice.strip())
            if action is None:
                self._out.error(f"Óþekkt aðgerð: {choice.strip()}")
                continue
            action()

    # --- Internal helpers -----------------------------------------------------

    def _fail(self, exc: DomainException) -> None:
        logger.debug("Operation aborted: %s", type(exc).__name__)
        self._out.error(exc.message)
