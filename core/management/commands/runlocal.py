"""Development server command that creates the schema before serving.

The core app ships no migration files; tables are created straight from
the models with ``migrate --run-syncdb``.
"""

from django.core.management import call_command
from django.core.management.commands.runserver import Command as RunServer


class Command(RunServer):
    """runserver that syncs the database schema first."""

    help = "Create missing tables from the models, then start the dev server"

    def inner_run(self, *args, **options):
        """Sync the schema once in the serving process, then serve."""
        self.stdout.write(self.style.NOTICE("Syncing database schema..."))
        call_command("migrate", run_syncdb=True, interactive=False, verbosity=0)
        super().inner_run(*args, **options)

    def check_migrations(self, *_args, **_kwargs):
        """Skip the unapplied-migrations warning; the schema is synced instead."""
