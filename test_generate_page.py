"""Unit tests for the Generate page controller."""
import pytest
import requests

from frontend.api_client import ApiError, ClientSession, PetApiClient
from frontend.generate_page import GeneratePage, PageState

PETS = [
    {"id": "p1", "name": "Mochi", "category": "Dog", "breed": "Shiba"},
    {"id": "p2", "name": "Kuma", "category": "Dog", "breed": "Akita"},
    {"id": "p3", "name": "Tama", "category": "Cat"},
]


class FakeApi:
    """Stands in for PetApiClient."""

    def __init__(self, pets=None, image="data:image/jpeg;base64,AAAA", error=None, list_error=None):
        self.pets = PETS if pets is None else pets
        self.image = image
        self.error = error
        self.list_error = list_error
        self.generate_calls = []
        self.on_generate = None

    def list_pets(self, session):
        if self.list_error:
            raise self.list_error
        return list(self.pets)

    def generate_child(self, parent1, parent2):
        self.generate_calls.append((parent1, parent2))
        if self.on_generate:
            self.on_generate()
        if self.error:
            raise self.error
        return self.image


class Harness:
    def __init__(self, api, session=ClientSession(user_id="u1", access_token="tok")):
        self.alerts = []
        self.routes = []
        self.states = []
        self.api = api
        self.page = GeneratePage(
            api=api,
            session_provider=lambda: session,
            navigate=self.routes.append,
            alert=self.alerts.append,
            on_state_change=self.states.append,
        )


@pytest.fixture
def harness():
    h = Harness(FakeApi())
    h.page.mount()
    return h


def test_starts_loading():
    page = Harness(FakeApi()).page
    assert page.state == PageState.LOADING
    assert page.render() == {"title": "Generate Child Image", "loading": True}


def test_no_session_redirects_to_login():
    h = Harness(FakeApi(), session=None)
    h.page.mount()
    assert h.routes == ["/login"]
    assert h.page.state == PageState.LOADING


def test_mount_loads_pets(harness):
    assert harness.page.state == PageState.READY
    view = harness.page.render()
    assert [o["label"] for o in view["options"]] == ["Mochi (Shiba)", "Kuma (Akita)", "Tama (Cat)"]
    assert view["button_label"] == "Generate Child Image"
    assert view["button_disabled"] is True


def test_pet_list_failure_leaves_empty_list():
    h = Harness(FakeApi(list_error=ApiError("boom", 500)))
    h.page.mount()
    assert h.page.state == PageState.READY
    assert h.page.pets == []


def test_requires_two_selections(harness):
    harness.page.select_parent1("p1")
    harness.page.generate()
    assert harness.alerts == ["Please select two pets"]
    assert harness.api.generate_calls == []


def test_rejects_identical_parents(harness):
    harness.page.select_parent1("p1")
    harness.page.select_parent2("p1")
    harness.page.generate()
    assert harness.alerts == ["Please select different pets"]
    assert harness.api.generate_calls == []


def test_successful_generation(harness):
    harness.page.select_parent1("p1")
    harness.page.select_parent2("p3")
    harness.page.generate()

    assert harness.api.generate_calls == [(PETS[0], PETS[2])]
    assert harness.page.generated_image == "data:image/jpeg;base64,AAAA"
    assert harness.states == [PageState.READY, PageState.GENERATING, PageState.IDLE]
    assert harness.alerts == []
    assert harness.page.render()["generated_image"] == "data:image/jpeg;base64,AAAA"


def test_button_busy_while_generating(harness):
    seen = {}
    harness.api.on_generate = lambda: seen.update(harness.page.render())
    harness.page.select_parent1("p1")
    harness.page.select_parent2("p2")
    harness.page.generate()

    assert seen["button_label"] == "Generating..."
    assert seen["button_disabled"] is True
    assert seen["generated_image"] is None


def test_failed_generation_alerts_and_returns_to_idle(harness):
    harness.api.error = ApiError("generate failed", 500)
    harness.page.select_parent1("p1")
    harness.page.select_parent2("p2")
    harness.page.generate()

    assert harness.alerts == ["Failed to generate image"]
    assert harness.states == [
        PageState.READY, PageState.GENERATING, PageState.GENERATING_FAILED, PageState.IDLE
    ]
    assert harness.page.generated_image is None
    assert harness.page.render()["button_disabled"] is False


def test_generate_ignored_while_in_flight(harness):
    harness.page.select_parent1("p1")
    harness.page.select_parent2("p2")
    harness.api.on_generate = harness.page.generate
    harness.page.generate()
    assert len(harness.api.generate_calls) == 1


class HtmlHttp:
    """requests-compatible transport that answers every call with 200 and an HTML page."""

    def request(self, method, url, **kwargs):
        response = requests.Response()
        response.status_code = 200
        response._content = b"<html>maintenance</html>"
        response.url = url
        return response


def test_non_json_generate_response_alerts_and_recovers():
    h = Harness(FakeApi())
    h.page.mount()
    h.page.api = PetApiClient("http://api.local", http=HtmlHttp())
    h.page.select_parent1("p1")
    h.page.select_parent2("p2")

    h.page.generate()
    assert h.alerts == ["Failed to generate image"]
    assert h.page.state == PageState.IDLE

    h.page.generate()
    assert h.alerts == ["Failed to generate image", "Failed to generate image"]
    assert h.page.state == PageState.IDLE


def test_non_json_pet_list_leaves_page_ready():
    h = Harness(PetApiClient("http://api.local", http=HtmlHttp()))
    h.page.mount()
    assert h.page.state == PageState.READY
    assert h.page.pets == []
