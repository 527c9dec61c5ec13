"""Unit tests for page_operations.publisher module.

The publisher is exercised with a Mock client (to check which mutation is
sent) and with a real GraphQLClient over a patched requests.post (to check
end-to-end request behaviour).
"""

import logging

import pytest
from unittest.mock import Mock, patch

from wikijs_publisher.models.document_reference import DocumentReference
from wikijs_publisher.models.remote_page import RemotePage
from wikijs_publisher.page_operations.models import PublishAction
from wikijs_publisher.page_operations.reporter import LoggingReporter
from wikijs_publisher.page_operations.publisher import (
    UNKNOWN_ERROR,
    Publisher,
    normalize_tags,
)
from wikijs_publisher.settings.models import Settings
from wikijs_publisher.wikijs_client.errors import (
    ConfigurationError,
    RemoteError,
    TransportError,
)
from wikijs_publisher.wikijs_client.graphql_client import GraphQLClient
from wikijs_publisher.wikijs_client.page_resolver import PageResolver
from tests.fixtures.wikijs_responses import (
    RecordingReporter,
    create_data,
    list_data,
    make_response,
    search_data,
    update_data,
)


SETTINGS = Settings(api_url="https://wiki.example.com/graphql", bearer_token="token")


def make_doc(title="Intro", path="/notes/Intro", content="# Intro\n", tags=None):
    return DocumentReference(title=title, path=path, content=content, tags=tags)


def make_publisher(responses, settings=SETTINGS):
    """Publisher over a Mock client returning responses in order."""
    client = Mock()
    client.send.side_effect = responses
    reporter = RecordingReporter()
    publisher = Publisher(settings, reporter, client=client, resolver=PageResolver(client))
    return publisher, client, reporter


def sent_mutation(client):
    """(query, variables) of the second call, i.e. the mutation."""
    assert client.send.call_count == 2
    return client.send.call_args_list[1].args


class TestNormalizeTags:

    def test_trims_each_tag(self):
        assert normalize_tags([" guide ", "draft\n"]) == ["guide", "draft"]

    def test_scalar_becomes_one_element_list(self):
        assert normalize_tags("guide") == ["guide"]

    def test_scalar_is_trimmed(self):
        assert normalize_tags("  guide  ") == ["guide"]

    def test_none_becomes_empty_list(self):
        assert normalize_tags(None) == []

    def test_non_string_values_converted(self):
        assert normalize_tags([2024, "x"]) == ["2024", "x"]
        assert normalize_tags(7) == ["7"]

    def test_empty_tags_dropped(self):
        assert normalize_tags(["a", "  ", "", None, "b"]) == ["a", "b"]

    def test_order_preserved(self):
        assert normalize_tags(["z", "a", "m"]) == ["z", "a", "m"]

    @pytest.mark.parametrize("raw", [
        [" guide", "draft "],
        "single",
        ["already", "clean"],
        [],
        None,
    ])
    def test_idempotent(self, raw):
        once = normalize_tags(raw)
        assert normalize_tags(once) == once


class TestCreateOrUpdate:
    """Resolution decides between create and update."""

    def test_unresolved_title_creates(self):
        publisher, client, _ = make_publisher([search_data(), create_data()])

        result = publisher.publish(make_doc(tags=["guide", "draft"]))

        query, variables = sent_mutation(client)
        assert "create(" in query
        assert "update(" not in query
        assert variables['path'] == "/notes/Intro"
        assert result.action is PublishAction.CREATE

    def test_resolved_title_updates(self):
        publisher, client, _ = make_publisher([search_data(42), update_data()])

        result = publisher.publish(make_doc())

        query, variables = sent_mutation(client)
        assert "update(" in query
        assert "create(" not in query
        assert variables['id'] == 42
        assert 'path' not in variables
        assert result.action is PublishAction.UPDATE

    def test_tags_normalized_before_sending(self):
        publisher, client, _ = make_publisher([search_data(), create_data()])

        publisher.publish(make_doc(tags=" solo "))

        _, variables = sent_mutation(client)
        assert variables['tags'] == ["solo"]

    def test_resolution_happens_on_every_publish(self):
        publisher, client, _ = make_publisher([
            search_data(), create_data(),
            search_data(8), update_data(),
        ])

        publisher.publish(make_doc())
        publisher.publish(make_doc())

        assert client.send.call_count == 4
        assert "create(" in client.send.call_args_list[1].args[0]
        assert "update(" in client.send.call_args_list[3].args[0]


class TestOutcomes:
    """One notice per publish, success or failure."""

    def test_create_success_exposes_page(self):
        page = {'id': 9, 'path': 'notes/Intro', 'title': 'Intro'}
        publisher, _, reporter = make_publisher([search_data(), create_data(page=page)])

        result = publisher.publish(make_doc())

        assert result.succeeded is True
        assert result.page == RemotePage(id=9, path='notes/Intro', title='Intro')
        assert len(reporter.notices) == 1
        assert "Published" in reporter.notices[0]

    def test_update_success_has_no_page(self):
        publisher, _, reporter = make_publisher([search_data(3), update_data()])

        result = publisher.publish(make_doc())

        assert result.succeeded is True
        assert result.page is None
        assert len(reporter.notices) == 1

    def test_failure_uses_server_message(self):
        publisher, _, reporter = make_publisher([
            search_data(), create_data(succeeded=False, message="Duplicate path"),
        ])

        result = publisher.publish(make_doc())

        assert result.succeeded is False
        assert isinstance(result.error, RemoteError)
        assert reporter.notices == ["Publish failed: Duplicate path"]

    def test_failure_without_message_uses_default(self):
        publisher, _, reporter = make_publisher([
            search_data(), create_data(succeeded=False, message=None),
        ])

        result = publisher.publish(make_doc())

        assert result.succeeded is False
        assert reporter.notices == [f"Publish failed: {UNKNOWN_ERROR}"]

    def test_absent_response_result_is_failure(self):
        publisher, _, reporter = make_publisher([search_data(), {'pages': {'create': None}}])

        result = publisher.publish(make_doc())

        assert result.succeeded is False
        assert len(reporter.notices) == 1
        assert UNKNOWN_ERROR in reporter.notices[0]

    def test_resolution_error_is_reported_once(self):
        publisher, client, reporter = make_publisher([TransportError(status_code=503)])

        result = publisher.publish(make_doc())

        assert result.succeeded is False
        assert client.send.call_count == 1
        assert reporter.notices == ["Publish failed: HTTP error: 503"]

    def test_unexpected_error_is_reported_not_raised(self):
        publisher, _, reporter = make_publisher([KeyError("boom")])

        result = publisher.publish(make_doc())

        assert result.succeeded is False
        assert len(reporter.notices) == 1


class TestDiagnostics:
    """Diagnostic lines only reach the reporter in debug mode."""

    def test_no_log_lines_by_default(self):
        publisher, _, reporter = make_publisher([search_data(), create_data()])

        publisher.publish(make_doc())

        assert reporter.logs == []

    def test_debug_emits_log_lines(self):
        debug_settings = SETTINGS.with_values(debug=True)
        publisher, _, reporter = make_publisher([search_data(), create_data()], settings=debug_settings)

        publisher.publish(make_doc())

        assert len(reporter.logs) >= 2
        assert len(reporter.notices) == 1

    def test_debug_lines_go_to_reporter_only(self, caplog):
        caplog.set_level(logging.DEBUG, logger="wikijs_publisher.page_operations")
        debug_settings = SETTINGS.with_values(debug=True)
        publisher, _, reporter = make_publisher([search_data(), create_data()], settings=debug_settings)

        publisher.publish(make_doc())

        line = "No existing page, creating at /notes/Intro"
        assert reporter.logs.count(line) == 1
        assert line not in [r.getMessage() for r in caplog.records]

    def test_diagnostics_logged_when_debug_off(self, caplog):
        caplog.set_level(logging.DEBUG, logger="wikijs_publisher.page_operations")
        publisher, _, _ = make_publisher([search_data(), create_data()])

        publisher.publish(make_doc())

        messages = [r.getMessage() for r in caplog.records]
        assert "No existing page, creating at /notes/Intro" in messages


class TestConnection:
    """Test cases for Publisher.test_connection()."""

    def test_reports_page_count(self):
        publisher, _, reporter = make_publisher([list_data([
            {'id': 1, 'path': 'a', 'title': 'A'},
            {'id': 2, 'path': 'b', 'title': 'B'},
        ])])

        result = publisher.test_connection()

        assert result.succeeded is True
        assert result.page_count == 2
        assert reporter.notices == ["Connection succeeded: 2 page(s) found"]

    def test_zero_pages_is_success(self):
        publisher, _, reporter = make_publisher([list_data([])])

        result = publisher.test_connection()

        assert result.succeeded is True
        assert result.page_count == 0

    def test_failure_reports_message(self):
        publisher, _, reporter = make_publisher([RemoteError("Forbidden")])

        result = publisher.test_connection()

        assert result.succeeded is False
        assert reporter.notices == ["Connection test failed: Forbidden"]


class TestScenarios:
    """End-to-end publish flows over a patched HTTP layer."""

    @patch('wikijs_publisher.wikijs_client.graphql_client.requests.post')
    def test_new_title_is_created(self, mock_post):
        mock_post.side_effect = [
            make_response({'data': search_data()}),
            make_response({'data': create_data(page={'id': 11, 'path': 'notes/Intro', 'title': 'Intro'})}),
        ]
        reporter = RecordingReporter()
        publisher = Publisher(SETTINGS, reporter)

        result = publisher.publish(make_doc(tags=["guide", "draft"]))

        assert mock_post.call_count == 2
        body = mock_post.call_args_list[1].kwargs['json']
        assert "create(" in body['query']
        assert body['variables']['path'] == "/notes/Intro"
        assert body['variables']['tags'] == ["guide", "draft"]
        assert result.succeeded is True
        assert len(reporter.notices) == 1
        assert "failed" not in reporter.notices[0]

    @patch('wikijs_publisher.wikijs_client.graphql_client.requests.post')
    def test_existing_title_update_rejected(self, mock_post):
        mock_post.side_effect = [
            make_response({'data': search_data(42)}),
            make_response({'data': update_data(succeeded=False, message="locked")}),
        ]
        reporter = RecordingReporter()
        publisher = Publisher(SETTINGS, reporter)

        result = publisher.publish(make_doc())

        body = mock_post.call_args_list[1].kwargs['json']
        assert "update(" in body['query']
        assert body['variables']['id'] == 42
        assert result.succeeded is False
        assert len(reporter.notices) == 1
        assert "locked" in reporter.notices[0]

    @patch('wikijs_publisher.wikijs_client.graphql_client.requests.post')
    def test_missing_token_fails_without_request(self, mock_post):
        reporter = RecordingReporter()
        publisher = Publisher(SETTINGS.with_values(bearer_token=""), reporter)

        result = publisher.publish(make_doc())

        mock_post.assert_not_called()
        assert result.succeeded is False
        assert isinstance(result.error, ConfigurationError)
        assert reporter.notices == [f"Publish failed: {ConfigurationError()}"]

    @patch('wikijs_publisher.wikijs_client.graphql_client.requests.post')
    def test_graphql_errors_report_first_message(self, mock_post):
        mock_post.return_value = make_response({
            'data': None,
            'errors': [{'message': 'first'}, {'message': 'second'}],
        })
        reporter = RecordingReporter()

        result = Publisher(SETTINGS, reporter).publish(make_doc())

        assert result.succeeded is False
        assert reporter.notices == ["Publish failed: first"]

    def test_default_client_built_from_settings(self):
        publisher = Publisher(SETTINGS, RecordingReporter())

        assert isinstance(publisher.client, GraphQLClient)
        assert publisher.client.settings is SETTINGS


class TestLoggingReporter:
    """LoggingReporter routes notices and diagnostics to logging."""

    def test_notice_logged_at_info(self, caplog):
        caplog.set_level(logging.DEBUG, logger="wikijs_publisher")

        reporter = LoggingReporter()
        reporter.notify("Published")
        reporter.log("resolving")

        levels = {(r.getMessage(), r.levelno) for r in caplog.records}
        assert ("Published", logging.INFO) in levels
        assert ("resolving", logging.DEBUG) in levels
