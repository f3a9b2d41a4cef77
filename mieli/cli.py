import logging
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from typing_extensions import Annotated

from mieli._client import Client
from mieli._utils import infer_content_type, read_payload, read_stdin, read_stdin_json
from mieli._version import VERSION
from mieli.errors import MeilisearchError, MissingInputError
from mieli.json_handler import build_json_handler
from mieli.models.config import DEFAULT_ADDR, DEFAULT_INDEX, DEFAULT_INTERVAL_MS, ClientConfig
from mieli.models.task import TaskFilter, TaskListParameters

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)

app = typer.Typer(name="mieli", help="A stupid wrapper around meilisearch", no_args_is_help=True)
index_app = typer.Typer(help="Manipulate indexes.", no_args_is_help=True)
documents_app = typer.Typer(help="Manipulate documents.", no_args_is_help=True)
tasks_app = typer.Typer(help="Get information on the task queue.", no_args_is_help=True)
batches_app = typer.Typer(help="Get information about the batches.", no_args_is_help=True)
key_app = typer.Typer(help="Get or update the keys.", no_args_is_help=True)
log_app = typer.Typer(help="Get or update the logs.", no_args_is_help=True)
experimental_app = typer.Typer(help="Get or update the experimental features.", no_args_is_help=True)

app.add_typer(index_app, name="index")
app.add_typer(documents_app, name="documents")
app.add_typer(tasks_app, name="tasks")
app.add_typer(batches_app, name="batches")
app.add_typer(key_app, name="key")
app.add_typer(log_app, name="log")
app.add_typer(experimental_app, name="experimental")


class JsonHandlerChoice(str, Enum):
    builtin = "builtin"
    orjson = "orjson"
    ujson = "ujson"


IndexArg = Annotated[
    Optional[str], typer.Argument(help="The index to use, defaults to the one given by `-i`.")
]
PrimaryKeyOpt = Annotated[
    Optional[str], typer.Option("--primary", "-p", "--primary-key", "--pk", help="Primary key")
]
ContentTypeOpt = Annotated[
    Optional[str], typer.Option("--content-type", "-c", help="Set the content-type of your file.")
]
FileArg = Annotated[
    Optional[Path],
    typer.Argument(exists=True, dir_okay=False, help="The file you want to send, stdin if absent."),
]

UidsOpt = Annotated[
    Optional[str],
    typer.Option("--uids", "--uid", help="Filter by uid. Separate multiple uids with a comma (,)"),
]
BatchUidsOpt = Annotated[
    Optional[str],
    typer.Option(help="Filter by batchUid. Separate multiple batchUids with a comma (,)"),
]
StatusesOpt = Annotated[
    Optional[str],
    typer.Option(
        "--statuses",
        "--status",
        help="Filter by status. Separate multiple statuses with a comma (,)",
    ),
]
TypesOpt = Annotated[
    Optional[str],
    typer.Option(
        "--types", "--type", help="Filter by type. Separate multiple types with a comma (,)"
    ),
]
IndexUidsOpt = Annotated[
    Optional[str],
    typer.Option(
        "--index-uids",
        "--indexes",
        help="Filter by indexUid. Separate multiple indexUids with a comma (,)",
    ),
]
CanceledByOpt = Annotated[
    Optional[str],
    typer.Option(help="Filter by canceledBy. Separate multiple task uids with a comma (,)"),
]
BeforeEnqueuedAtOpt = Annotated[Optional[str], typer.Option(help="Filter by `enqueuedAt`")]
AfterEnqueuedAtOpt = Annotated[Optional[str], typer.Option(help="Filter by `enqueuedAt`")]
BeforeStartedAtOpt = Annotated[Optional[str], typer.Option(help="Filter by `startedAt`")]
AfterStartedAtOpt = Annotated[Optional[str], typer.Option(help="Filter by `startedAt`")]
BeforeFinishedAtOpt = Annotated[Optional[str], typer.Option(help="Filter by `finishedAt`")]
AfterFinishedAtOpt = Annotated[Optional[str], typer.Option(help="Filter by `finishedAt`")]
LimitOpt = Annotated[Optional[int], typer.Option(help="Number of results to return")]
FromOpt = Annotated[
    Optional[int], typer.Option("--from", "--offset", help="`uid` of the first result returned")
]
ReverseOpt = Annotated[
    bool,
    typer.Option(
        "--reverse", "--rev", help="Return results from the oldest to the most recent"
    ),
]


def _setup_logging(verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(level=level, format="[%(levelname)s] %(name)s: %(message)s", force=True)


@contextmanager
def _client(ctx: typer.Context) -> Iterator[Client]:
    try:
        with Client(ctx.obj) as client:
            yield client
    except MeilisearchError as err:
        err_console.print(f"[red]Error:[/red] {escape(str(err))}")
        raise typer.Exit(code=1) from err


@app.callback()
def callback(
    ctx: typer.Context,
    verbose: Annotated[
        int, typer.Option("--verbose", "-v", count=True, help="Show headers and more logs.")
    ] = 0,
    addr: Annotated[
        str,
        typer.Option(
            "--addr",
            "-a",
            envvar="MEILI_ADDR",
            help="The server address in the format of ip_addr:port (ex: http://0.0.0.0:7700)",
        ),
    ] = DEFAULT_ADDR,
    async_: Annotated[
        bool,
        typer.Option("--async", help="The command will exit immediately after executing."),
    ] = False,
    index: Annotated[
        str, typer.Option("--index", "-i", envvar="MIELI_INDEX", help="The name of the index")
    ] = DEFAULT_INDEX,
    key: Annotated[
        Optional[str], typer.Option("--key", "-k", envvar="MEILI_MASTER_KEY", help="Your API key")
    ] = None,
    user_agent: Annotated[
        str, typer.Option(help="Use a specific http User-Agent for your request")
    ] = f"mieli/{VERSION}",
    custom_header: Annotated[
        Optional[str],
        typer.Option(help='Add an http header to your request, eg. "x-meilisearch-client: doggo/42"'),
    ] = None,
    interval: Annotated[
        int, typer.Option(min=0, help="Interval between each status check (in milliseconds)")
    ] = DEFAULT_INTERVAL_MS,
    timeout: Annotated[
        Optional[float],
        typer.Option(envvar="MIELI_TIMEOUT", help="Request timeout in seconds, none by default"),
    ] = None,
    json_handler: Annotated[
        JsonHandlerChoice,
        typer.Option(envvar="MIELI_JSON_HANDLER", help="The library used to handle json"),
    ] = JsonHandlerChoice.builtin,
    fail_on_task_error: Annotated[
        bool,
        typer.Option(
            envvar="MIELI_FAIL_ON_TASK_ERROR",
            help="Exit with an error when a watched task fails or is canceled.",
        ),
    ] = False,
) -> None:
    _setup_logging(verbose)
    try:
        build_json_handler(json_handler.value)
    except ValueError as err:
        raise typer.BadParameter(str(err), param_hint="--json-handler") from err

    ctx.obj = ClientConfig(
        addr=addr,
        index=index,
        key=key,
        verbose=verbose,
        fire_and_forget=async_,
        interval_ms=interval,
        user_agent=user_agent,
        custom_header=custom_header,
        timeout=timeout,
        json_handler=json_handler.value,
        fail_on_task_error=fail_on_task_error,
    )


@index_app.command("list")
def index_list(
    ctx: typer.Context,
    offset: Annotated[Optional[int], typer.Option(help="Number of indexes to skip")] = None,
    limit: Annotated[Optional[int], typer.Option(help="Number of indexes to return")] = None,
) -> None:
    """List all indexes."""
    with _client(ctx) as client:
        client.get_indexes(offset=offset, limit=limit)


@index_app.command("get")
def index_get(ctx: typer.Context, index: IndexArg = None) -> None:
    """Get an index."""
    with _client(ctx) as client:
        client.index(index).get()


@index_app.command("create")
def index_create(ctx: typer.Context, index: IndexArg = None, primary: PrimaryKeyOpt = None) -> None:
    """Create an index."""
    with _client(ctx) as client:
        client.index(index).create(primary)


@index_app.command("update")
def index_update(ctx: typer.Context, index: IndexArg = None, primary: PrimaryKeyOpt = None) -> None:
    """Update the primary key of an index."""
    with _client(ctx) as client:
        client.index(index).update(primary)


@index_app.command("delete")
def index_delete(ctx: typer.Context, index: IndexArg = None) -> None:
    """Delete an index."""
    with _client(ctx) as client:
        client.index(index).delete()


@documents_app.command("get")
def documents_get(
    ctx: typer.Context,
    document_id: Annotated[
        Optional[str], typer.Argument(help="The document to retrieve, all documents if absent")
    ] = None,
    limit: Annotated[
        Optional[int], typer.Option("--limit", "--limits", help="Number of documents to return")
    ] = None,
    offset: Annotated[
        Optional[int], typer.Option("--offset", "--from", help="Skip the n first documents")
    ] = None,
    fields: Annotated[
        Optional[List[str]],
        typer.Option("--fields", "--field", help="Select fields from the documents"),
    ] = None,
) -> None:
    """Get one document, or all the documents when no id is given."""
    with _client(ctx) as client:
        index = client.index()
        if document_id is None:
            index.get_documents(limit=limit, offset=offset, fields=fields)
        else:
            index.get_document(document_id, fields=fields)


def _index_documents(
    ctx: typer.Context,
    file: Path | None,
    content_type: str | None,
    primary: str | None,
    replace: bool,
) -> None:
    with _client(ctx) as client:
        client.index().add_documents(
            read_payload(file),
            content_type=infer_content_type(file, content_type),
            primary_key=primary,
            replace=replace,
        )


@documents_app.command("add")
def documents_add(
    ctx: typer.Context,
    file: FileArg = None,
    content_type: ContentTypeOpt = None,
    primary: PrimaryKeyOpt = None,
) -> None:
    """Add or update documents, the content-type is inferred from the file extension."""
    _index_documents(ctx, file, content_type, primary, replace=False)


@documents_app.command("update")
def documents_update(
    ctx: typer.Context,
    file: FileArg = None,
    content_type: ContentTypeOpt = None,
    primary: PrimaryKeyOpt = None,
) -> None:
    """Add or replace documents, the content-type is inferred from the file extension."""
    _index_documents(ctx, file, content_type, primary, replace=True)


@documents_app.command("delete")
def documents_delete(
    ctx: typer.Context,
    document_ids: Annotated[
        Optional[List[str]], typer.Argument(help="The documents to delete, all if absent")
    ] = None,
) -> None:
    """Delete documents. Every document is deleted when no id is given."""
    with _client(ctx) as client:
        client.index().delete_documents(document_ids)


@app.command("da")
def documents_add_shortcut(
    ctx: typer.Context,
    file: FileArg = None,
    content_type: ContentTypeOpt = None,
    primary: PrimaryKeyOpt = None,
) -> None:
    """Shortcut to add documents."""
    _index_documents(ctx, file, content_type, primary, replace=False)


@app.command("dd")
def documents_delete_shortcut(
    ctx: typer.Context,
    ids: Annotated[
        Optional[List[str]], typer.Option("--ids", help="The ids of the documents to delete")
    ] = None,
    filter: Annotated[
        Optional[str], typer.Option("--filter", help="The filter used to delete the documents")
    ] = None,
) -> None:
    """Shortcut to delete documents."""
    if ids and filter:
        raise typer.BadParameter("--ids cannot be used with --filter", param_hint="--ids")

    with _client(ctx) as client:
        if filter:
            client.index().delete_documents_by_filter(filter)
        else:
            client.index().delete_documents(ids)


@app.command()
def dump(ctx: typer.Context) -> None:
    """Create a dump."""
    with _client(ctx) as client:
        client.create_dump()


@app.command()
def snapshot(ctx: typer.Context) -> None:
    """Create a snapshot."""
    with _client(ctx) as client:
        client.create_snapshot()


def _list_parameters(
    limit: int | None, from_: int | None, reverse: bool, task_filter: TaskFilter
) -> TaskListParameters:
    return TaskListParameters(
        limit=limit, from_=from_, reverse=reverse or None, **task_filter.model_dump(exclude_none=True)
    )


def _task_filter(
    uids: str | None,
    batch_uids: str | None,
    statuses: str | None,
    types: str | None,
    index_uids: str | None,
    canceled_by: str | None,
    before_enqueued_at: str | None,
    after_enqueued_at: str | None,
    before_started_at: str | None,
    after_started_at: str | None,
    before_finished_at: str | None,
    after_finished_at: str | None,
) -> TaskFilter:
    return TaskFilter(
        uids=uids,
        batch_uids=batch_uids,
        statuses=statuses,
        types=types,
        index_uids=index_uids,
        canceled_by=canceled_by,
        before_enqueued_at=before_enqueued_at,
        after_enqueued_at=after_enqueued_at,
        before_started_at=before_started_at,
        after_started_at=after_started_at,
        before_finished_at=before_finished_at,
        after_finished_at=after_finished_at,
    )


def _get_tasks_or_batches(
    ctx: typer.Context, resource_id: int | None, parameters: TaskListParameters, *, batches: bool
) -> None:
    with _client(ctx) as client:
        if resource_id is None:
            if batches:
                client.get_batches(parameters)
            else:
                client.get_tasks(parameters)
            return

        if parameters != TaskListParameters():
            logger.warning(
                "extra parameters have been specified while retrieving a %s by id. The following parameters will be ignored: `%s`",
                "batch" if batches else "task",
                parameters.to_params(),
            )

        if batches:
            client.get_batch(resource_id)
        else:
            client.get_task(resource_id)


IdArg = Annotated[
    Optional[int],
    typer.Argument(help="Get a single element. Filters cannot be used if an id is specified"),
]


@tasks_app.command("list")
def tasks_list(
    ctx: typer.Context,
    id: IdArg = None,
    limit: LimitOpt = None,
    from_: FromOpt = None,
    reverse: ReverseOpt = False,
    uids: UidsOpt = None,
    batch_uids: BatchUidsOpt = None,
    statuses: StatusesOpt = None,
    types: TypesOpt = None,
    index_uids: IndexUidsOpt = None,
    canceled_by: CanceledByOpt = None,
    before_enqueued_at: BeforeEnqueuedAtOpt = None,
    after_enqueued_at: AfterEnqueuedAtOpt = None,
    before_started_at: BeforeStartedAtOpt = None,
    after_started_at: AfterStartedAtOpt = None,
    before_finished_at: BeforeFinishedAtOpt = None,
    after_finished_at: AfterFinishedAtOpt = None,
) -> None:
    """List the tasks, most recent first, or get a single task."""
    task_filter = _task_filter(
        uids,
        batch_uids,
        statuses,
        types,
        index_uids,
        canceled_by,
        before_enqueued_at,
        after_enqueued_at,
        before_started_at,
        after_started_at,
        before_finished_at,
        after_finished_at,
    )
    _get_tasks_or_batches(
        ctx, id, _list_parameters(limit, from_, reverse, task_filter), batches=False
    )


app.command("tl", help="Shortcut to list the tasks.")(tasks_list)


@tasks_app.command("cancel")
def tasks_cancel(
    ctx: typer.Context,
    uids: UidsOpt = None,
    batch_uids: BatchUidsOpt = None,
    statuses: StatusesOpt = None,
    types: TypesOpt = None,
    index_uids: IndexUidsOpt = None,
    canceled_by: CanceledByOpt = None,
    before_enqueued_at: BeforeEnqueuedAtOpt = None,
    after_enqueued_at: AfterEnqueuedAtOpt = None,
    before_started_at: BeforeStartedAtOpt = None,
    after_started_at: AfterStartedAtOpt = None,
    before_finished_at: BeforeFinishedAtOpt = None,
    after_finished_at: AfterFinishedAtOpt = None,
) -> None:
    """Cancel enqueued or processing tasks. Either all matching tasks are canceled or none are."""
    task_filter = _task_filter(
        uids,
        batch_uids,
        statuses,
        types,
        index_uids,
        canceled_by,
        before_enqueued_at,
        after_enqueued_at,
        before_started_at,
        after_started_at,
        before_finished_at,
        after_finished_at,
    )
    with _client(ctx) as client:
        client.cancel_tasks(task_filter)


@tasks_app.command("delete")
def tasks_delete(
    ctx: typer.Context,
    uids: UidsOpt = None,
    batch_uids: BatchUidsOpt = None,
    statuses: StatusesOpt = None,
    types: TypesOpt = None,
    index_uids: IndexUidsOpt = None,
    canceled_by: CanceledByOpt = None,
    before_enqueued_at: BeforeEnqueuedAtOpt = None,
    after_enqueued_at: AfterEnqueuedAtOpt = None,
    before_started_at: BeforeStartedAtOpt = None,
    after_started_at: AfterStartedAtOpt = None,
    before_finished_at: BeforeFinishedAtOpt = None,
    after_finished_at: AfterFinishedAtOpt = None,
) -> None:
    """Delete finished tasks. Either all matching tasks are deleted or none are."""
    task_filter = _task_filter(
        uids,
        batch_uids,
        statuses,
        types,
        index_uids,
        canceled_by,
        before_enqueued_at,
        after_enqueued_at,
        before_started_at,
        after_started_at,
        before_finished_at,
        after_finished_at,
    )
    with _client(ctx) as client:
        client.delete_tasks(task_filter)


@batches_app.command("list")
def batches_list(
    ctx: typer.Context,
    id: IdArg = None,
    limit: LimitOpt = None,
    from_: FromOpt = None,
    reverse: ReverseOpt = False,
    uids: UidsOpt = None,
    batch_uids: BatchUidsOpt = None,
    statuses: StatusesOpt = None,
    types: TypesOpt = None,
    index_uids: IndexUidsOpt = None,
    canceled_by: CanceledByOpt = None,
    before_enqueued_at: BeforeEnqueuedAtOpt = None,
    after_enqueued_at: AfterEnqueuedAtOpt = None,
    before_started_at: BeforeStartedAtOpt = None,
    after_started_at: AfterStartedAtOpt = None,
    before_finished_at: BeforeFinishedAtOpt = None,
    after_finished_at: AfterFinishedAtOpt = None,
) -> None:
    """List the batches, or get a single batch."""
    task_filter = _task_filter(
        uids,
        batch_uids,
        statuses,
        types,
        index_uids,
        canceled_by,
        before_enqueued_at,
        after_enqueued_at,
        before_started_at,
        after_started_at,
        before_finished_at,
        after_finished_at,
    )
    _get_tasks_or_batches(
        ctx, id, _list_parameters(limit, from_, reverse, task_filter), batches=True
    )


@app.command()
def health(ctx: typer.Context) -> None:
    """Do an healthcheck."""
    with _client(ctx) as client:
        client.health()


@app.command()
def version(ctx: typer.Context) -> None:
    """Return the version of the running meilisearch instance."""
    with _client(ctx) as client:
        client.get_version()


@app.command()
def stats(ctx: typer.Context) -> None:
    """Return the stats about the indexes."""
    with _client(ctx) as client:
        client.get_all_stats()


@app.command()
def search(
    ctx: typer.Context,
    search_terms: Annotated[
        Optional[List[str]], typer.Argument(help="What you want to search")
    ] = None,
) -> None:
    """Do a search. Search parameters can be piped in the command as json.

    The search terms given as arguments replace the `q` parameter of the piped json.
    """
    with _client(ctx) as client:
        query = read_stdin_json(client.json_handler, "", required=False)
        if query is None:
            query = {}
        elif not isinstance(query, dict):
            raise MissingInputError("The search parameters must be a json object")
        if search_terms:
            query["q"] = " ".join(search_terms)
        client.index().search(query)


@app.command()
def settings(ctx: typer.Context) -> None:
    """Get the settings, or update them with the settings piped in the command."""
    with _client(ctx) as client:
        payload = read_stdin()
        if payload is None:
            client.index().get_settings()
        else:
            client.index().update_settings(payload)


@key_app.command("list")
def key_list(ctx: typer.Context) -> None:
    """List all keys."""
    with _client(ctx) as client:
        client.get_keys()


@key_app.command("get")
def key_get(
    ctx: typer.Context,
    k: Annotated[
        Optional[str], typer.Argument(help="The key to retrieve, defaults to the one given by `-k`")
    ] = None,
) -> None:
    """Get a key."""
    with _client(ctx) as client:
        key = k if k else client.config.key
        if not key:
            raise MissingInputError("No key to retrieve")
        client.get_key(key)


@key_app.command("create")
def key_create(ctx: typer.Context) -> None:
    """Create a key. The json needs to be piped in the command."""
    with _client(ctx) as client:
        client.create_key(
            read_stdin_json(client.json_handler, "You need to send a key. See `mieli key template`.")
        )


@key_app.command("update")
def key_update(
    ctx: typer.Context,
    k: Annotated[
        Optional[str], typer.Argument(help="The key to update, read from the json if absent")
    ] = None,
) -> None:
    """Update a key. The json needs to be piped in the command."""
    with _client(ctx) as client:
        update = read_stdin_json(
            client.json_handler, "You need to send a key. See `mieli key template`."
        )
        key = k if k else (update.get("key") if isinstance(update, dict) else None)
        if not key:
            raise MissingInputError(
                "You need to provide a key either in the json or as an argument"
            )
        client.update_key(key, update)


@key_app.command("delete")
def key_delete(ctx: typer.Context, k: Annotated[str, typer.Argument(help="The key to delete")]) -> None:
    """Delete a key."""
    with _client(ctx) as client:
        client.delete_key(k)


@key_app.command("template")
def key_template(ctx: typer.Context) -> None:
    """Show an example of a valid json you can send to create a key."""
    with _client(ctx) as client:
        client.key_template()


@log_app.command("stream")
def log_stream(
    ctx: typer.Context,
    mode: Annotated[str, typer.Argument(help="Either human-readable or json output")] = "human",
    target: Annotated[
        str, typer.Argument(help="One or more log type and its log level")
    ] = "info",
) -> None:
    """Stream the logs until Ctrl-C."""
    with _client(ctx) as client:
        client.stream_logs(mode=mode, target=target)


@log_app.command("remove")
def log_remove(ctx: typer.Context) -> None:
    """Stop streaming the logs."""
    with _client(ctx) as client:
        client.remove_log_stream()


@log_app.command("stderr")
def log_stderr(ctx: typer.Context, target: Annotated[str, typer.Argument()]) -> None:
    """Update the log target of the logs outputted on stderr."""
    with _client(ctx) as client:
        client.update_log_target(target)


@experimental_app.command("get")
def experimental_get(ctx: typer.Context) -> None:
    """Get the experimental features."""
    with _client(ctx) as client:
        client.get_experimental_features()


@experimental_app.command("update")
def experimental_update(ctx: typer.Context) -> None:
    """Update the experimental features with the json piped in the command."""
    with _client(ctx) as client:
        client.update_experimental_features(
            read_stdin_json(client.json_handler, "You need to pipe the experimental features.")
        )


@app.command()
def status(
    ctx: typer.Context,
    update_id: Annotated[int, typer.Argument(help="The legacy update to look at")],
    watch: Annotated[bool, typer.Option(help="Wait until the update is processed")] = False,
) -> None:
    """Get the status of a legacy update (servers older than v0.25)."""
    with _client(ctx) as client:
        client.index().get_update(update_id, watch=watch)


@app.command("self-version")
def self_version() -> None:
    """Return the current version of mieli."""
    typer.echo(f"mieli - version {VERSION}")


def _alias(typer_app: typer.Typer, command: Callable[..., None], *names: str) -> None:
    for name in names:
        typer_app.command(name, hidden=True)(command)


for alias in ("indexes", "i"):
    app.add_typer(index_app, name=alias, hidden=True)
for alias in ("document", "doc", "docs", "d"):
    app.add_typer(documents_app, name=alias, hidden=True)
for alias in ("task", "t"):
    app.add_typer(tasks_app, name=alias, hidden=True)
for alias in ("batch", "b"):
    app.add_typer(batches_app, name=alias, hidden=True)
for alias in ("keys", "k"):
    app.add_typer(key_app, name=alias, hidden=True)
app.add_typer(log_app, name="logs", hidden=True)
for alias in ("exp", "experimental-features"):
    app.add_typer(experimental_app, name=alias, hidden=True)

_alias(app, version, "ver", "v")
_alias(app, stats, "stat")
_alias(app, settings, "set", "setting")

_alias(index_app, index_list, "all")
_alias(documents_app, documents_get, "g")
_alias(documents_app, documents_add, "a")
_alias(documents_app, documents_update, "u")
_alias(documents_app, documents_delete, "d")
_alias(tasks_app, tasks_list, "l", "get", "g")
_alias(tasks_app, tasks_delete, "d", "remove", "rm", "r")
_alias(batches_app, batches_list, "l", "get", "g")
_alias(key_app, key_list, "all")
_alias(key_app, key_create, "post")
_alias(key_app, key_update, "patch")
_alias(log_app, log_stream, "get", "retrieve")
_alias(log_app, log_remove, "stop", "interrupt")
_alias(log_app, log_stderr, "update")
_alias(experimental_app, experimental_get, "list", "all")
_alias(experimental_app, experimental_update, "post", "create")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
