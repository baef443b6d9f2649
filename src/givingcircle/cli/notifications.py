"""Notification sink that prints notices to the terminal."""

import click

from givingcircle.domain.notifications import NotificationSink


class ClickNotificationSink(NotificationSink):
    """Echo success notices to stdout and failures to stderr."""

    def notify_success(self, message: str) -> None:
        click.echo(message)

    def notify_failure(self, message: str) -> None:
        click.echo(f"Error: {message}", err=True)
