"""Base class for presenters.

A presenter wraps a read-only pydantic model and adds derived, display-ready
values. Presenters share one serialization contract: select raw fields with
``only`` and derived values with ``methods``.
"""

import logging
from collections.abc import Iterable
from typing import Any, ClassVar

from pydantic import BaseModel
from pydantic_core import to_jsonable_python

from article_presenter.exceptions import UnknownAttributeError

logger = logging.getLogger(__name__)


class Presenter:
    """Base class for model presenters.

    Subclasses list the derivation methods callable through ``as_json`` in
    SERIALIZABLE_METHODS.

    Attributes:
        object: The wrapped model
    """

    SERIALIZABLE_METHODS: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, obj: BaseModel):
        self.object = obj

    def as_json(
        self,
        only: Iterable[str] | None = None,
        methods: Iterable[str] | None = None,
    ) -> dict[str, Any]:
        """Serialize raw fields and derived values into a JSON-ready dict.

        Args:
            only: Raw field names to include (default: all fields)
            methods: Derivation method names to include

        Returns:
            Mapping of field/method name to JSON-compatible value

        Raises:
            UnknownAttributeError: If a field or method name is unknown
        """
        fields = self.object.model_dump(mode="json")

        if only is None:
            result = dict(fields)
        else:
            result = {}
            for name in only:
                if name not in fields:
                    raise UnknownAttributeError(name, f"Unknown field: {name}")
                result[name] = fields[name]

        for name in methods or ():
            if name not in self.SERIALIZABLE_METHODS:
                raise UnknownAttributeError(name, f"Unknown method: {name}")
            result[name] = to_jsonable_python(getattr(self, name)())

        logger.debug(f"Serialized {type(self.object).__name__} with keys {list(result)}")
        return result
