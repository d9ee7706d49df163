from django.apps import apps
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from heroes.coreutils import resolve_model_string
from heroes.models import Orderable


class Command(BaseCommand):
    help = (
        "Spread the sort orders of manually ordered collections back out to "
        "evenly spaced values, keeping the current display order"
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "models",
            nargs="*",
            help="Models to renumber, as app_label.ModelName or ModelName (default: all orderable models)",
        )
        parser.add_argument(
            "--step",
            type=int,
            help="Gap between consecutive sort orders (default: HEROES_SORT_ORDER_STEP, or 10)",
        )

    def handle(self, *args, **options):
        step = options.get("step")
        if step is None:
            step = getattr(settings, "HEROES_SORT_ORDER_STEP", 10)
        if step < 1:
            raise CommandError("--step must be a positive integer")

        models = [
            self.get_model(model_string) for model_string in options.get("models")
        ] or get_orderable_models()

        total = 0
        for model in models:
            changed = renumber_model(model, step)
            total += changed
            if options["verbosity"] >= 2:
                self.stdout.write(
                    "%s: %d rows renumbered" % (model._meta.label, changed)
                )

        if total:
            self.stdout.write(
                self.style.SUCCESS("Successfully renumbered %d rows" % total)
            )
        else:
            self.stdout.write("No rows renumbered")

    def get_model(self, model_string):
        try:
            model = resolve_model_string(model_string)
        except (LookupError, ValueError) as e:
            raise CommandError(str(e))
        if not issubclass(model, Orderable):
            raise CommandError("%s is not an orderable model" % model._meta.label)
        return model


def get_orderable_models():
    return [
        model
        for model in apps.get_models()
        if issubclass(model, Orderable) and not model._meta.abstract
    ]


def renumber_model(model, step):
    """
    Renumber every sibling collection of ``model``. Returns the number of rows
    whose sort order changed.
    """
    if not model.sort_order_scope:
        return model.renumber(step=step)

    changed = 0
    scopes = (
        model._default_manager.order_by()
        .values(*model.sort_order_scope)
        .distinct()
    )
    for scope in scopes:
        changed += model.renumber(step=step, **scope)
    return changed
