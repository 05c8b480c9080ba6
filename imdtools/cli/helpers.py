from functools import partial
from typing import Any, Callable, Union

import click
from click.core import ParameterSource


def grouped_option(group: str, *args: Any, **kwargs: Any) -> Callable:
    """click option that lands in ctx.params[group] instead of being passed
    to the command on its own, and only if the user actually gave it, so the
    keyword defaults of loaders and dumpers stay in charge otherwise"""
    return click.option(
        *args, callback=partial(_store_in_group, group), expose_value=False, **kwargs
    )


loader_option = partial(grouped_option, "loader_options")
dumper_option = partial(grouped_option, "dumper_options")


def _store_in_group(
    group: str,
    ctx: click.Context,
    param: Union[click.Option, click.Parameter],
    value: Any,
) -> None:
    assert param.name is not None
    source = ctx.get_parameter_source(param.name)
    if source not in (ParameterSource.DEFAULT, ParameterSource.DEFAULT_MAP):
        ctx.params.setdefault(group, {})[param.name] = value
