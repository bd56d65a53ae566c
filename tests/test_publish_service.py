"""Tests for services/publish_service.py

Covers ordering, fail-fast, cleanup on every path and the error
precedence of a publish run.
"""

import logging

import pytest

from component_publisher.api.exceptions import (
    CleanupError,
    CliVersionMismatchError,
    InvalidCredentialsError,
    NetworkOrRegistryError,
    PackagingError,
    RegistryRejectionError,
    RegistryResolutionError,
    RegistryTransportError,
    UnauthorizedError,
)
from component_publisher.core import Cleanup
from component_publisher.models import PublishRequest
from component_publisher.services import (
    PublishService,
    RegistryPublisher,
    StaticRegistryResolver,
)

from .fakes import FakeTransport

REGISTRY_A = "https://a.example.com/"
REGISTRY_B = "https://b.example.com"
REGISTRY_C = "https://c.example.com/"
ROUTE_A = "https://a.example.com/hello-world/1.0.0"
ROUTE_B = "https://b.example.com/hello-world/1.0.0"
ROUTE_C = "https://c.example.com/hello-world/1.0.0"


class CountingCleanup(Cleanup):
    """Cleanup that records calls and can be made to fail"""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.paths = []

    async def remove(self, path):
        self.paths.append(path)
        if self.fail:
            raise CleanupError(str(path), PermissionError("read-only filesystem"))
        await super().remove(path)


class FailingResolver:
    async def resolve(self):
        raise OSError("config unreachable")


def make_service(registries, transport, broker, logger, cleanup=None, resolver=None):
    return PublishService(
        registry_resolver=resolver or StaticRegistryResolver(registries),
        registry_publisher=RegistryPublisher(transport, broker, logger),
        cleanup=cleanup or CountingCleanup(),
        logger=logger
    )


class TestPublishSuccess:
    """Successful runs"""

    @pytest.mark.asyncio
    async def test_publishes_to_all_registries_in_order(self, component_dir, broker, test_logger):
        transport = FakeTransport()
        cleanup = CountingCleanup()
        service = make_service([REGISTRY_A, REGISTRY_B, REGISTRY_C], transport, broker,
                               test_logger, cleanup)

        result = await service.publish(PublishRequest(component_dir))

        assert result.success
        assert result.error is None
        assert transport.routes == [ROUTE_A, ROUTE_B, ROUTE_C]
        assert [e.registry for e in result.published] == [REGISTRY_A, REGISTRY_B, REGISTRY_C]
        assert result.artifact.name == "hello-world"
        assert result.artifact.version == "1.0.0"
        assert cleanup.paths == [component_dir.resolve() / "package.tar.gz"]

    @pytest.mark.asyncio
    async def test_archive_removed_and_package_dir_kept(self, component_dir, broker, test_logger):
        transport = FakeTransport()
        service = make_service([REGISTRY_A], transport, broker, test_logger)

        result = await service.publish(PublishRequest(component_dir))

        assert result.success
        uploaded_path = transport.calls[0][1]
        assert uploaded_path.name == "package.tar.gz"
        assert not (component_dir / "package.tar.gz").exists()
        assert (component_dir / "_package" / "package.json").exists()

    @pytest.mark.asyncio
    async def test_no_registries_succeeds_and_cleans_up(self, component_dir, broker, test_logger):
        transport = FakeTransport()
        cleanup = CountingCleanup()
        service = make_service([], transport, broker, test_logger, cleanup)

        result = await service.publish(PublishRequest(component_dir))

        assert result.success
        assert transport.calls == []
        assert len(cleanup.paths) == 1

    @pytest.mark.asyncio
    async def test_supplied_credentials_used_for_every_registry(
            self, component_dir, broker, prompter, test_logger):
        transport = FakeTransport({ROUTE_B: [UnauthorizedError(ROUTE_B)]})
        service = make_service([REGISTRY_A, REGISTRY_B], transport, broker, test_logger)
        request = PublishRequest(component_dir, username="alice", password="secret")

        result = await service.publish(request)

        assert isinstance(result.error, InvalidCredentialsError)
        assert prompter.prompt_count == 0
        assert all(creds == request.credentials for _, _, creds in transport.calls)

    @pytest.mark.asyncio
    async def test_prompted_credentials_are_per_registry(
            self, component_dir, broker, prompter, test_logger):
        transport = FakeTransport({
            ROUTE_A: [UnauthorizedError(ROUTE_A)],
            ROUTE_B: [UnauthorizedError(ROUTE_B)],
        })
        service = make_service([REGISTRY_A, REGISTRY_B], transport, broker, test_logger)

        result = await service.publish(PublishRequest(component_dir))

        assert result.success
        assert prompter.prompt_count == 2
        assert [creds is None for _, _, creds in transport.calls] == [True, False, True, False]

    @pytest.mark.asyncio
    async def test_only_username_is_not_treated_as_credentials(
            self, component_dir, broker, prompter, test_logger):
        transport = FakeTransport({ROUTE_A: [UnauthorizedError(ROUTE_A)]})
        service = make_service([REGISTRY_A], transport, broker, test_logger)

        result = await service.publish(PublishRequest(component_dir, username="alice"))

        assert result.success
        assert prompter.prompt_count == 1
        assert transport.calls[0][2] is None

    @pytest.mark.asyncio
    async def test_logs_progress(self, component_dir, broker, test_logger, caplog):
        caplog.set_level(logging.INFO, logger=test_logger.name)
        service = make_service([REGISTRY_A], FakeTransport(), broker, test_logger)

        await service.publish(PublishRequest(component_dir))

        messages = [r.getMessage() for r in caplog.records if r.name == test_logger.name]
        assert messages[0].startswith("Packaging -> ")
        assert messages[0].endswith("_package")
        assert messages[1].startswith("Compressing -> ")
        assert messages[1].endswith("package.tar.gz")
        assert messages[2:] == [f"Publishing -> {ROUTE_A}", f"Published -> {ROUTE_A}"]


class TestPublishFailure:
    """Failing runs"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("failing_index", [0, 1, 2])
    async def test_stops_at_first_failing_registry(
            self, component_dir, broker, test_logger, failing_index):
        registries = [REGISTRY_A, REGISTRY_B, REGISTRY_C]
        routes = [ROUTE_A, ROUTE_B, ROUTE_C]
        failing_route = routes[failing_index]
        transport = FakeTransport({failing_route: [RegistryTransportError("boom")]})
        cleanup = CountingCleanup()
        service = make_service(registries, transport, broker, test_logger, cleanup)

        result = await service.publish(PublishRequest(component_dir))

        assert not result.success
        assert isinstance(result.error, NetworkOrRegistryError)
        assert transport.routes == routes[:failing_index + 1]
        assert result.skipped == registries[failing_index + 1:]
        assert result.failed_endpoint.route == failing_route
        assert len(cleanup.paths) == 1

    @pytest.mark.asyncio
    async def test_cli_version_rejection_on_second_registry(self, component_dir, broker, test_logger):
        rejection = RegistryRejectionError(
            "cli_version_not_valid",
            "CLI version is not valid",
            {"suggestedVersion": "3.2.0"}
        )
        transport = FakeTransport({ROUTE_B: [rejection]})
        cleanup = CountingCleanup()
        service = make_service([REGISTRY_A, REGISTRY_B], transport, broker, test_logger, cleanup)

        result = await service.publish(PublishRequest(component_dir))

        assert not result.success
        assert isinstance(result.error, CliVersionMismatchError)
        assert "3.2.0" in str(result.error)
        assert [e.success for e in result.endpoints] == [True, False]
        assert len(cleanup.paths) == 1
        assert not (component_dir / "package.tar.gz").exists()

    @pytest.mark.asyncio
    async def test_packaging_failure_skips_uploads_and_still_cleans_up(
            self, component_dir, broker, test_logger):
        (component_dir / "package.json").write_text('{"name": "hello-world"}')
        transport = FakeTransport()
        cleanup = CountingCleanup()
        service = make_service([REGISTRY_A], transport, broker, test_logger, cleanup)

        result = await service.publish(PublishRequest(component_dir))

        assert isinstance(result.error, PackagingError)
        assert "version" in str(result.error)
        assert str(result.error).startswith("An error happened when creating the package")
        assert transport.calls == []
        assert result.artifact is None
        assert len(cleanup.paths) == 1
        assert result.cleanup_error is None

    @pytest.mark.asyncio
    async def test_missing_component_directory(self, tmp_path, broker, test_logger):
        service = make_service([REGISTRY_A], FakeTransport(), broker, test_logger)

        result = await service.publish(PublishRequest(tmp_path / "missing"))

        assert isinstance(result.error, PackagingError)

    @pytest.mark.asyncio
    async def test_resolution_failure(self, component_dir, broker, test_logger):
        transport = FakeTransport()
        cleanup = CountingCleanup()
        service = make_service([], transport, broker, test_logger, cleanup,
                               resolver=FailingResolver())

        result = await service.publish(PublishRequest(component_dir))

        assert isinstance(result.error, RegistryResolutionError)
        assert "config unreachable" in str(result.error)
        assert transport.calls == []
        assert not (component_dir / "_package").exists()
        assert len(cleanup.paths) == 1


class TestCleanupPrecedence:
    """Cleanup errors never hide an earlier failure"""

    @pytest.mark.asyncio
    async def test_cleanup_error_surfaced_after_success(self, component_dir, broker, test_logger):
        service = make_service([REGISTRY_A], FakeTransport(), broker, test_logger,
                               CountingCleanup(fail=True))

        result = await service.publish(PublishRequest(component_dir))

        assert not result.success
        assert isinstance(result.error, CleanupError)
        assert result.cleanup_error is result.error
        assert len(result.published) == 1

    @pytest.mark.asyncio
    async def test_upload_error_wins_over_cleanup_error(self, component_dir, broker, test_logger):
        transport = FakeTransport({ROUTE_A: [RegistryTransportError("boom")]})
        service = make_service([REGISTRY_A], transport, broker, test_logger,
                               CountingCleanup(fail=True))

        result = await service.publish(PublishRequest(component_dir))

        assert isinstance(result.error, NetworkOrRegistryError)
        assert isinstance(result.cleanup_error, CleanupError)

    @pytest.mark.asyncio
    async def test_packaging_error_wins_over_cleanup_error(self, component_dir, broker, test_logger):
        (component_dir / "package.json").write_text("not json")
        service = make_service([REGISTRY_A], FakeTransport(), broker, test_logger,
                               CountingCleanup(fail=True))

        result = await service.publish(PublishRequest(component_dir))

        assert isinstance(result.error, PackagingError)


class TestRepeatedRuns:
    """No local 'already published' state between runs"""

    @pytest.mark.asyncio
    async def test_second_run_reports_registry_answer(self, component_dir, broker, test_logger):
        duplicate = RegistryRejectionError("version_already_exists", "Version already exists")
        transport = FakeTransport({ROUTE_A: [None, duplicate]})
        service = make_service([REGISTRY_A], transport, broker, test_logger)

        first = await service.publish(PublishRequest(component_dir))
        second = await service.publish(PublishRequest(component_dir))

        assert first.success
        assert isinstance(second.error, NetworkOrRegistryError)
        assert "Version already exists" in str(second.error)
        assert transport.routes == [ROUTE_A, ROUTE_A]


class TestSuppliedCredentials:
    """Request credentials are resolved once per run"""

    @pytest.mark.asyncio
    async def test_using_credentials_logged_once(self, component_dir, broker, prompter,
                                                 test_logger, caplog):
        caplog.set_level(logging.INFO, logger=test_logger.name)
        transport = FakeTransport()
        service = make_service([REGISTRY_A, REGISTRY_B], transport, broker, test_logger)
        request = PublishRequest(component_dir, username="alice", password="secret")

        result = await service.publish(request)

        assert result.success
        messages = [r.getMessage() for r in caplog.records if r.name == test_logger.name]
        assert messages.count("Using specified credentials") == 1
        assert messages.index("Using specified credentials") < messages.index(f"Publishing -> {ROUTE_A}")
        assert prompter.prompt_count == 0
        assert [creds for _, _, creds in transport.calls] == [request.credentials] * 2
