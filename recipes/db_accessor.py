from typing import Any, Dict, List, Mapping, Optional, Sequence, Type
from django.db.models import Model, QuerySet


class DB_Accessor:
    """Generic data accessor to wrap basic queryset operations."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def queryset(self) -> QuerySet:
        """Base queryset; repos override to add select_related/annotations."""
        return self.model.objects.all()

    def list(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
        limit: Optional[int] = None,
        offset: int = 0,
        as_dict: bool = False,
    ) -> QuerySet | List[Dict[str, Any]]:
        """Return a filtered/sliced queryset (or list of dicts)."""
        qs: QuerySet = self.queryset().filter(**(filters or {}))
        qs = self._apply_ordering(qs, order_by)
        qs = self._apply_slice(qs, offset=offset, limit=limit)
        return list(qs.values()) if as_dict else qs

    def _apply_ordering(self, qs: QuerySet, order_by: Sequence[str]) -> QuerySet:
        return qs.order_by(*order_by) if order_by else qs

    def _apply_slice(
        self, qs: QuerySet, *, offset: int = 0, limit: Optional[int] = None
    ) -> QuerySet:
        if not (offset or limit is not None):
            return qs
        start = max(0, int(offset))
        end = None if limit is None else start + max(0, int(limit))
        return qs[start:end]

    def get(self, **lookup: Any) -> Model:
        """Fetch a single object matching the lookup."""
        return self.queryset().get(**lookup)

    def get_or_none(self, **lookup: Any) -> Optional[Model]:
        """Fetch a single object or None when nothing matches."""
        return self.queryset().filter(**lookup).first()

    def exists(self, **lookup: Any) -> bool:
        return self.model.objects.filter(**lookup).exists()

    def count(self, **lookup: Any) -> int:
        return self.model.objects.filter(**lookup).count()

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        return self.model.objects.create(**data)

    def update(self, lookup: Mapping[str, Any], **data: Any) -> int:
        """Update objects matching lookup; return count updated."""
        return self.model.objects.filter(**lookup).update(**data)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
