"""Shared test fixtures."""

from __future__ import annotations

import pytest

from industry_page.config import Settings
from industry_page.controller import PageController
from industry_page.renderer import marker_ids
from industry_page.window import SimulatedWindow


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        sticky_threshold=100,
        log_level="DEBUG",
        log_format="console",
        _env_file=None,
    )


@pytest.fixture()
def window() -> SimulatedWindow:
    return SimulatedWindow(viewport_height=800)


@pytest.fixture()
def sample_document() -> dict:
    return {
        "title": "Cardiology",
        "subtitle": "Digital care for every heartbeat",
        "image": "/images/cardiology.jpg",
        "description": {
            "intro": ["Cardiology teams need reliable software.", "We build it."],
            "conclusion": "Let's talk about your next project.",
        },
        "industryStatus": {
            "title": "Cardiology Today",
            "items": ["Remote monitoring is growing", "Data volumes are rising"],
        },
        "challenges": ["Interoperability", "Regulatory compliance"],
        "requirements": ["HIPAA", "HL7 FHIR"],
        "solutions": [
            {"title": "Remote Monitoring", "items": ["Wearable integration", "Alerts"]},
            {"title": "Analytics", "items": ["Risk scoring"]},
        ],
        "benefits": [{"title": "Faster diagnosis", "description": "Less waiting."}],
        "features": [
            {"title": "ECG Viewer", "description": "In-browser ECG review", "image": "/img/ecg.png"},
            {"title": "Scheduling", "description": "Smart booking"},
        ],
        "faq": [
            {"question": "Is it HIPAA compliant?", "answer": "Yes."},
            {"question": "Does it support FHIR?", "answer": "Yes, R4."},
            {"question": "Can it run on-prem?", "answer": "On request."},
        ],
    }


@pytest.fixture()
def controller(sample_document: dict, window: SimulatedWindow, settings: Settings) -> PageController:
    ctrl = PageController(
        sample_document, source=window, parent_title="Health Services", settings=settings
    )
    # Hero banner takes the first 400px; revealable sections stack below it.
    window.stack(marker_ids(ctrl.view_model), start=400, height=400)
    yield ctrl
    ctrl.deactivate()
