import re
from typing import Optional

from prcheck.core.schema.check import TitleCheck

ALLOWED_PREFIXES = ('feat', 'fix', 'docs', 'style', 'refactor', 'test', 'chore')
TITLE_PATTERN = re.compile(rf'^({"|".join(ALLOWED_PREFIXES)})(\(.+\))?: .+')


def validate_pr_title(title: Optional[str]) -> TitleCheck:
    """Check a PR title against the conventional ``type(scope): subject`` form.

    The scope is optional. The title is matched as given; surrounding
    whitespace is only considered when deciding whether it is empty.
    """
    if not title or not title.strip():
        return TitleCheck(valid=False, message='PR title must not be empty')

    if not TITLE_PATTERN.match(title):
        return TitleCheck(
            valid=False,
            message=(
                'PR title format is invalid. It should start with one of: '
                f'{", ".join(ALLOWED_PREFIXES)}'
            ),
        )

    return TitleCheck(valid=True, message='PR title format is valid')
