from pathlib import Path

from hotlog import get_logger

from repogen.config import default_config_path, load_config
from repogen.display import echo_lines, is_success, render_response
from repogen.exceptions import ApiError
from repogen.github import create_repository
from repogen.resolver import resolve_request, resolve_template

logger = get_logger(__name__)


def command(
    *,
    config_path: Path | None,
    template: str | None,
    name: str | None,
    description: str | None,
    private: bool,
    owner: str | None,
) -> int:
    """Generate a repository from a template and print GitHub's answer.

    Returns 0 once a response has been rendered, including when GitHub
    refused the request; that refusal is shown to the operator and logged
    but is not an error of the tool itself.
    """
    config = load_config(config_path or default_config_path())

    ref = resolve_template(config, template)
    request = resolve_request(
        name=name,
        description=description,
        private=private,
        owner=owner,
    )

    response = create_repository(ref.link, request)
    echo_lines(render_response(response))

    if is_success(response):
        logger.info(
            'repository_created',
            repository=response.get('full_name', request.name),
            template=ref.link,
            _display_level=1,
        )
    else:
        err = ApiError(response)
        logger.warning(err.get_log_category(), error=str(err))
    return 0
