"""
Step definitions for DigitalOcean Resource Manager CLI tests.
"""

import io
import shlex
from contextlib import redirect_stderr

from behave import given, then, when
from rich.console import Console

from do_manager.cli.main import run
from do_manager.core.errors import APIError
from do_manager.core.models import DomainCreateRequest, DomainRecordEditRequest
from do_manager.services.mock_service import MockDomainsService
from do_manager.services.service_client import ServiceClient


@given("the resource manager uses the mock backend")
def step_impl(context):
    """Wire a fresh mock domains service into a client."""
    context.domains = MockDomainsService()
    context.client = ServiceClient.from_services(context.domains)


@given('the domain "{name}" exists')
def step_impl(context, name):
    """Create a domain directly in the mock."""
    context.domains.create(DomainCreateRequest(name))
    context.domains.calls.clear()


@given('the domain "{name}" has {count:d} records')
def step_impl(context, name, count):
    """Create records directly in the mock."""
    for i in range(count):
        context.domains.create_record(
            name, DomainRecordEditRequest("A", f"host{i + 1}", f"192.0.2.{i + 1}")
        )
    context.domains.calls.clear()


@given('deleting record {record_id:d} fails with "{message}"')
def step_impl(context, record_id, message):
    """Make one record deletion fail."""
    context.domains.fail_with(
        "delete_record",
        APIError(message, status_code=500),
        when=lambda name, rid: rid == record_id,
    )


@when('I run "{command}"')
def step_impl(context, command):
    """Run a CLI command against the mock client."""
    console = Console(file=io.StringIO(), width=200, color_system=None)
    errors = io.StringIO()
    with redirect_stderr(errors):
        context.exit_status = run(
            ["-c", str(context.test_config_file), *shlex.split(command)],
            client=context.client,
            console=console,
        )
    context.output = console.file.getvalue()
    context.errors = errors.getvalue()


@then("the command succeeds")
def step_impl(context):
    """Verify a zero exit status."""
    assert context.exit_status == 0, f"exit {context.exit_status}: {context.errors}"


@then('the command fails with "{message}"')
def step_impl(context, message):
    """Verify a non-zero exit status and the error message."""
    assert context.exit_status != 0, "command unexpectedly succeeded"
    assert message in context.errors, f"{message!r} not in {context.errors!r}"


@then('the output contains "{text}"')
def step_impl(context, text):
    """Verify the command output."""
    assert text in context.output, f"{text!r} not in {context.output!r}"


@then("no remote call was made")
def step_impl(context):
    """Verify the mock saw no calls."""
    assert context.domains.calls == [], context.domains.calls


@then("records {first:d} and {second:d} were deleted in that order")
def step_impl(context, first, second):
    """Verify the attempted deletions."""
    attempted = [rid for _, rid in context.domains.calls_to("delete_record")]
    assert attempted == [first, second], attempted


@then('the domain "{name}" still has {count:d} records')
def step_impl(context, name, count):
    """Verify the records left in the mock."""
    records = context.domains.records(name)
    assert len(records) == count, records
