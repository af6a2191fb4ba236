from hotlog import get_logger

from repogen.config import TemplateConfig
from repogen.models import RepoRequest, TemplateRef
from repogen.prompts import ask_confirm, ask_select, ask_text

logger = get_logger(__name__)


def resolve_template(config: TemplateConfig, template: str | None) -> TemplateRef:
    """Pick the template to generate from.

    Uses ``template`` when given, otherwise asks the operator to choose one of
    the configured names. An empty config falls back to a free-text prompt
    for an ``owner/repo`` reference.

    Args:
        config: Loaded template configuration.
        template: Value of ``--template``, if any.

    Returns:
        The chosen name and the link it resolves to.
    """
    if template is None:
        names = config.names()
        if names:
            template = ask_select('Template', names)
        else:
            template = ask_text('Template (owner/repo)')

    ref = TemplateRef(name=template, link=config.lookup(template))
    logger.info(
        'template_resolved',
        template=ref.name,
        link=ref.link,
        _display_level=1,
    )
    return ref


def resolve_request(
    *,
    name: str | None,
    description: str | None,
    private: bool,
    owner: str | None,
) -> RepoRequest:
    """Build the repository request, prompting for anything not supplied.

    ``private`` is a plain toggle: when set no confirmation is asked, when
    unset the operator is always asked.
    """
    if name is None:
        name = ask_text('Name')
    if description is None:
        description = ask_text('Description', default='')
    if not private:
        private = ask_confirm('Private')
    if owner is None:
        owner = ask_text('Owner (leave blank for yourself)', default='')

    request = RepoRequest(
        name=name,
        description=description,
        private=private,
        owner=owner,
    )
    logger.debug('repo_request_resolved', request=request.model_dump())
    return request
