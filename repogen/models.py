from pydantic import BaseModel, ConfigDict, Field


class TemplateRef(BaseModel):
    """The template chosen by the operator and the link it resolved to."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description='Template name as selected or typed')
    link: str = Field(description='Template repository in owner/repo form')


class RepoRequest(BaseModel):
    """Settings for the repository generated from a template."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description='Name of the new repository')
    private: bool = Field(description='Create the repository as private')
    owner: str = Field(
        default='',
        description='Owning user or organization; empty means the authenticated account',
    )
    description: str = Field(
        default='',
        description='Repository description',
    )

    def form_fields(self) -> list[str]:
        """Return the request as ``gh api`` typed form field arguments.

        ``owner`` is only sent when set so GitHub falls back to the
        authenticated account.
        """
        args = [
            '-F',
            f'name={self.name}',
            '-F',
            f'description={self.description}',
            '-F',
            f'private={str(self.private).lower()}',
        ]
        if self.owner:
            args.extend(['-F', f'owner={self.owner}'])
        return args
