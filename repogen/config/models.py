from pydantic import BaseModel, ConfigDict, Field


class TemplateEntry(BaseModel):
    """A single named template repository from the config file."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description='Human-facing label offered in the template prompt',
    )
    link: str = Field(
        description='Template reference in owner/repo form',
    )


class TemplateConfig(BaseModel):
    """Configuration for repogen (YAML structure).

    Example:
        configs:
          - name: python-lib
            link: my-org/python-lib-template
    """

    configs: list[TemplateEntry] = Field(
        default=...,
        description='Named templates, in the order they are offered',
    )

    def names(self) -> list[str]:
        """Return the template names in file order."""
        return [entry.name for entry in self.configs]

    def lookup(self, value: str) -> str:
        """Return the link for a template name.

        The first entry whose name matches exactly wins. When nothing matches,
        ``value`` is taken to be an ad-hoc ``owner/repo`` reference and
        returned unchanged.
        """
        for entry in self.configs:
            if entry.name == value:
                return entry.link
        return value
