"""Invoke tasks for local development."""

from invoke import Context, task


@task
def dev(c: Context) -> None:
    """Start the Django development server on :8000."""
    c.run("uv run python manage.py runserver", pty=True)


@task
def migrate(c: Context) -> None:
    """Run Django database migrations."""
    c.run("uv run python manage.py migrate", pty=True)


@task
def test(c: Context, path: str = "", k: str = "") -> None:
    """Run backend tests. Use -p for a file path, -k for a test name filter."""
    cmd = "uv run pytest"
    if path:
        cmd += f" {path}"
    if k:
        cmd += f" -k {k}"
    c.run(cmd, pty=True)


@task
def lint(c: Context) -> None:
    """Run ruff linter."""
    c.run("uv run ruff check .", pty=True)


@task
def fmt(c: Context) -> None:
    """Run ruff formatter."""
    c.run("uv run ruff format .", pty=True)


@task
def check(c: Context) -> None:
    """Run all linting and format checks (ruff lint, ruff format)."""
    c.run("uv run ruff check .", pty=True)
    c.run("uv run ruff format --check .", pty=True)
