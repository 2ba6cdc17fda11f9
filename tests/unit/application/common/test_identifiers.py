"""Tests for to_entity_id."""

import pytest

from lang_portal.application.common import to_entity_id
from lang_portal.domain.common.value_objects import WordId
from lang_portal.exceptions import WordNotFoundError


class TestToEntityId:
    def test_builds_typed_id(self) -> None:
        assert to_entity_id(WordId, 4, WordNotFoundError) == WordId(4)

    @pytest.mark.parametrize("value", [0, -1, -100])
    def test_unassignable_ids_are_not_found(self, value: int) -> None:
        with pytest.raises(WordNotFoundError) as exc_info:
            to_entity_id(WordId, value, WordNotFoundError)

        assert exc_info.value.word_id == value
