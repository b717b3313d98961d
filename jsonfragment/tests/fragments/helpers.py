from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional, Tuple

from jsonfragment.app.fragments import FragmentValue, ModelFragment


class RecordingKeys(str, Enum):
    VALUE = "value"


class RecordingFragment(ModelFragment[RecordingKeys]):
    """
    Field-keyed fragment whose rule applies to any model.

    Used ONLY in tests to observe which rules ran, in which order, and
    against which model.
    """

    model_type = object

    def __init__(
        self,
        value: FragmentValue = 1,
        *,
        calls: Optional[List[Tuple["RecordingFragment", Any]]] = None,
        **kwargs: Any,
    ) -> None:
        self.calls = calls if calls is not None else []
        super().__init__({RecordingKeys.VALUE: value}, **kwargs)

    def compare_model(self, model: Any) -> None:
        self.calls.append((self, model))
