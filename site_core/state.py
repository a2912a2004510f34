# site_core/state.py

from __future__ import annotations
from typing import Any, List, MutableMapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError

from .search import same_label
from .constants import ALL_TYPES_ID


class SelectionState(BaseModel):
    """
    The filters and the opened item of one listing page.

    Every transition returns a new state, so the model is a plain transition
    function over values. Category and skill filters exclude each other;
    selecting the active one again clears it.
    """
    model_config = ConfigDict(frozen=True)

    item_type: str = ALL_TYPES_ID
    category: Optional[str] = None
    skill: Optional[str] = None
    detail_id: Optional[str] = None

    # --- Transitions ---

    def select_category(self, category_id: str) -> SelectionState:
        category = None if self.category == category_id else category_id
        return self.model_copy(update={"category": category, "skill": None})

    def select_skill(self, skill: str) -> SelectionState:
        if self.skill is not None and same_label(self.skill, skill):
            new_skill = None
        else:
            new_skill = skill
        return self.model_copy(update={"skill": new_skill, "category": None})

    def set_type(self, item_type: str) -> SelectionState:
        return self.model_copy(update={"item_type": item_type or ALL_TYPES_ID})

    def open_detail(self, item_id: str) -> SelectionState:
        return self.model_copy(update={"detail_id": item_id})

    def close_detail(self) -> SelectionState:
        return self.model_copy(update={"detail_id": None})

    def reset(self) -> SelectionState:
        return SelectionState()

    # --- Queries ---

    @property
    def is_filtered(self) -> bool:
        return self.item_type != ALL_TYPES_ID or self.category is not None or self.skill is not None

    def active_filters(self) -> List[Tuple[str, str]]:
        """(kind, value) pairs for the filters currently in effect."""
        active = []
        if self.item_type != ALL_TYPES_ID:
            active.append(("type", self.item_type))
        if self.category is not None:
            active.append(("category", self.category))
        if self.skill is not None:
            active.append(("skill", self.skill))
        return active

    # --- Session binding ---

    @classmethod
    def from_session(cls, session: MutableMapping[str, Any], key: str) -> SelectionState:
        """
        Reads the state stored under `key`, or the initial state if there is none.
        `session` is `st.session_state` at runtime, any mapping in tests.
        """
        raw = session.get(key)
        if isinstance(raw, dict):
            try:
                return cls.model_validate(raw)
            except ValidationError:
                return cls()
        return cls()

    def save_to_session(self, session: MutableMapping[str, Any], key: str) -> None:
        session[key] = self.model_dump()


class HandoffSlot:
    """
    A single-use value passed from one page to the next.

    The sender `put`s a value before navigating; the receiver `take`s it on
    arrival, which clears the slot so the value is seen exactly once.
    """

    def __init__(self, session: MutableMapping[str, Any], key: str):
        self._session = session
        self._key = key

    def put(self, value: str) -> None:
        self._session[self._key] = value

    def take(self) -> Optional[str]:
        return self._session.pop(self._key, None)

    def __bool__(self) -> bool:
        return self._session.get(self._key) is not None


def state_from_handoff(slot: HandoffSlot, current: SelectionState) -> SelectionState:
    """Starts from a fresh skill filter when a skill was handed over, else keeps `current`."""
    skill = slot.take()
    if skill:
        return SelectionState().select_skill(skill)
    return current
