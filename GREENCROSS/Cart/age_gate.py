# Cart/age_gate.py
import logging

from GREENCROSS.Cart.storage import AGE_VERIFIED_KEY

logger = logging.getLogger(__name__)


class AgeGate:
    """21+ confirmation, remembered in local storage."""

    def __init__(self, storage) -> None:
        self.storage = storage
        self._confirmed = False

    @property
    def is_verified(self) -> bool:
        if self._confirmed:
            return True
        try:
            return self.storage.get_item(AGE_VERIFIED_KEY) == "true"
        except Exception:
            logger.debug("Age flag unreadable, asking again", exc_info=True)
            return False

    def confirm(self) -> None:
        self._confirmed = True
        try:
            self.storage.set_item(AGE_VERIFIED_KEY, "true")
        except Exception:
            logger.debug("Could not persist age flag", exc_info=True)
