"""Label entity: a coloured tag that can be attached to terms."""

from datetime import UTC, datetime

from glossa.domain.project.model.value import LabelId, ProjectId
from glossa.domain.shared.authorization.resource import LabelResource
from glossa.domain.shared.model.entity import Entity

DEFAULT_LABEL_COLOR = "#808080"


class Label(Entity):
    """Invariant: `(project_id, name)` is unique."""

    id: LabelId
    project_id: ProjectId
    name: str
    color: str = DEFAULT_LABEL_COLOR
    value: str | None = None
    created_at: datetime

    def edit(
        self,
        name: str | None = None,
        color: str | None = None,
        value: str | None = None,
    ) -> None:
        if name is not None:
            self.name = name
        if color is not None:
            self.color = color
        if value is not None:
            self.value = value

    def snapshot(self) -> LabelResource:
        return LabelResource(id=self.id, project_id=self.project_id)

    @classmethod
    def create(
        cls,
        project_id: ProjectId,
        name: str,
        color: str | None = None,
        value: str | None = None,
    ) -> "Label":
        return cls(
            id=LabelId.generate(),
            project_id=project_id,
            name=name,
            color=color or DEFAULT_LABEL_COLOR,
            value=value,
            created_at=datetime.now(UTC),
        )
