"""Generate page: pick two parent pets and request an image of their child.

The page is a small state machine:

    loading -> ready -> (idle | generating) -> (idle | generating-failed)

``generating-failed`` is transient: the user is alerted and the page goes
back to ``idle`` so the request can simply be resubmitted.
"""
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from frontend.api_client import ApiError, ClientSession, PetApiClient
from utils.logger import get_logger

logger = get_logger("frontend.generate_page")

LOGIN_PATH = "/login"
PAGE_TITLE = "Generate Child Image"
BUTTON_LABEL = "Generate Child Image"
BUTTON_LABEL_BUSY = "Generating..."

ALERT_SELECT_TWO = "Please select two pets"
ALERT_SELECT_DIFFERENT = "Please select different pets"
ALERT_GENERATE_FAILED = "Failed to generate image"


class PageState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    IDLE = "idle"
    GENERATING = "generating"
    GENERATING_FAILED = "generating-failed"


class GeneratePage:
    """Controller for the Generate page.

    Collaborators are injected: ``session_provider`` returns the signed-in
    session (or None), ``navigate`` changes route, ``alert`` shows a blocking
    message, and ``on_state_change`` observes every transition.
    """

    def __init__(
        self,
        api: PetApiClient,
        session_provider: Callable[[], Optional[ClientSession]],
        navigate: Callable[[str], None],
        alert: Callable[[str], None],
        on_state_change: Optional[Callable[[PageState], None]] = None
    ):
        self.api = api
        self.session_provider = session_provider
        self.navigate = navigate
        self.alert = alert
        self.on_state_change = on_state_change

        self.state = PageState.LOADING
        self.session: Optional[ClientSession] = None
        self.pets: List[Dict[str, Any]] = []
        self.parent1_id = ""
        self.parent2_id = ""
        self.generated_image: Optional[str] = None

    def _set_state(self, state: PageState):
        self.state = state
        if self.on_state_change:
            self.on_state_change(state)

    def mount(self):
        """Resolve the session and load the user's pets."""
        session = self.session_provider()
        if session is None:
            self.navigate(LOGIN_PATH)
            return

        self.session = session
        try:
            self.pets = self.api.list_pets(session)
        except ApiError as e:
            logger.error(f"Fetch pets error: {e}")
            self.pets = []
        finally:
            self._set_state(PageState.READY)

    def select_parent1(self, pet_id: str):
        self.parent1_id = pet_id or ""

    def select_parent2(self, pet_id: str):
        self.parent2_id = pet_id or ""

    def _find_pet(self, pet_id: str) -> Optional[Dict[str, Any]]:
        return next((p for p in self.pets if p.get("id") == pet_id), None)

    def generate(self):
        """Submit both parents to the generate-child endpoint."""
        if self.state in (PageState.LOADING, PageState.GENERATING):
            return

        if not self.parent1_id or not self.parent2_id:
            self.alert(ALERT_SELECT_TWO)
            return
        if self.parent1_id == self.parent2_id:
            self.alert(ALERT_SELECT_DIFFERENT)
            return

        parent1 = self._find_pet(self.parent1_id)
        parent2 = self._find_pet(self.parent2_id)
        if parent1 is None or parent2 is None:
            self.alert(ALERT_SELECT_TWO)
            return

        self.generated_image = None
        self._set_state(PageState.GENERATING)
        try:
            self.generated_image = self.api.generate_child(parent1, parent2)
        except ApiError as e:
            logger.error(f"Generate error: {e}")
            self._set_state(PageState.GENERATING_FAILED)
            self.alert(ALERT_GENERATE_FAILED)
        finally:
            self._set_state(PageState.IDLE)

    @staticmethod
    def pet_label(pet: Dict[str, Any]) -> str:
        return f"{pet.get('name')} ({pet.get('breed') or pet.get('category')})"

    def render(self) -> Dict[str, Any]:
        """View model for the current state."""
        if self.state == PageState.LOADING:
            return {"title": PAGE_TITLE, "loading": True}

        generating = self.state == PageState.GENERATING
        return {
            "title": PAGE_TITLE,
            "loading": False,
            "options": [{"value": p.get("id"), "label": self.pet_label(p)} for p in self.pets],
            "parent1_id": self.parent1_id,
            "parent2_id": self.parent2_id,
            "button_label": BUTTON_LABEL_BUSY if generating else BUTTON_LABEL,
            "button_disabled": not self.parent1_id or not self.parent2_id or generating,
            "generated_image": self.generated_image,
        }
