from prcheck.core.schema.check import CheckStatus, LineCountCheck

MAX_CHANGED_LINES = 500


def check_changed_lines(additions: int, deletions: int) -> LineCountCheck:
    total = additions + deletions
    if total > MAX_CHANGED_LINES:
        return LineCountCheck(
            status=CheckStatus.WARNING,
            message=(
                f'Large change ({total} lines), consider splitting it '
                'into several PRs'
            ),
            total=total,
        )

    return LineCountCheck(
        status=CheckStatus.SUCCESS,
        message=f'Change size is reasonable ({total} lines)',
        total=total,
    )
