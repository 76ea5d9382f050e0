"""
Unit Tests for Event Publisher Adapters

Tests for:
- LocalEventPublisher: in-process channel fan-out
- PusherEventPublisher: Pusher Channels through the pusher SDK
"""

import logging
import threading
from unittest.mock import MagicMock, patch

import pytest
from pusher.errors import PusherBadAuth
from pydantic import SecretStr

from jukebox_rooms.config.settings import PusherSettings
from jukebox_rooms.infrastructure.realtime.local_publisher import LocalEventPublisher
from jukebox_rooms.infrastructure.realtime.pusher_publisher import PusherEventPublisher

# =============================================================================
# LocalEventPublisher Tests
# =============================================================================


class TestLocalEventPublisher:
    @pytest.mark.asyncio
    async def test_fan_out_to_channel_subscribers(self):
        publisher = LocalEventPublisher()
        received: list[tuple[str, str, dict]] = []

        async def first(name, payload):
            received.append(("first", name, payload))

        async def second(name, payload):
            received.append(("second", name, payload))

        publisher.subscribe("room-AAAA", first)
        publisher.subscribe("room-AAAA", second)

        await publisher.publish("room-AAAA", "queue-updated", {"queue": []})

        assert sorted(r[0] for r in received) == ["first", "second"]
        assert all(r[1] == "queue-updated" for r in received)

    @pytest.mark.asyncio
    async def test_other_channels_not_notified(self):
        publisher = LocalEventPublisher()
        received = []

        async def handler(name, payload):
            received.append(name)

        publisher.subscribe("room-AAAA", handler)
        await publisher.publish("room-BBBB", "vote-updated", {})

        assert received == []

    @pytest.mark.asyncio
    async def test_failing_handler_isolated(self, caplog):
        """A broken subscriber is logged and does not stop the others."""
        publisher = LocalEventPublisher()
        received = []

        async def broken(name, payload):
            raise ValueError("bad handler")

        async def healthy(name, payload):
            received.append(name)

        publisher.subscribe("room-AAAA", broken)
        publisher.subscribe("room-AAAA", healthy)

        await publisher.publish("room-AAAA", "participant-joined", {})

        assert received == ["participant-joined"]
        assert "Subscriber on room-AAAA failed handling participant-joined" in caplog.text

    @pytest.mark.asyncio
    async def test_no_subscribers(self, caplog):
        publisher = LocalEventPublisher()

        with caplog.at_level(logging.DEBUG):
            await publisher.publish("room-AAAA", "participant-left", {})

        assert "No subscribers on room-AAAA" in caplog.text

    def test_subscribe_unsubscribe(self):
        publisher = LocalEventPublisher()

        async def handler(name, payload):
            pass

        publisher.subscribe("room-AAAA", handler)
        assert publisher.subscriber_count("room-AAAA") == 1

        publisher.unsubscribe("room-AAAA", handler)
        publisher.unsubscribe("room-AAAA", handler)
        assert publisher.subscriber_count("room-AAAA") == 0

    @pytest.mark.asyncio
    async def test_aclose_drops_subscribers(self):
        publisher = LocalEventPublisher()

        async def handler(name, payload):
            pass

        publisher.subscribe("room-AAAA", handler)
        await publisher.aclose()

        assert publisher.subscriber_count("room-AAAA") == 0



# =============================================================================
# PusherEventPublisher Tests
# =============================================================================

PUBLISHER_MODULE = "jukebox_rooms.infrastructure.realtime.pusher_publisher"


@pytest.fixture
def pusher_settings():
    return PusherSettings(app_id="12345", key="app-key", secret=SecretStr("app-secret"))


class TestPusherEventPublisher:
    @pytest.mark.asyncio
    async def test_client_built_from_settings(self, pusher_settings):
        """The SDK client gets the app credentials, cluster, TLS flag and timeout."""
        with patch(f"{PUBLISHER_MODULE}.Pusher") as mock_pusher:
            publisher = PusherEventPublisher(pusher_settings)
            await publisher.publish("room-AAAA", "vote-updated", {"songId": "s1"})

        mock_pusher.assert_called_once_with(
            app_id="12345",
            key="app-key",
            secret="app-secret",
            cluster="us2",
            ssl=True,
            timeout=5,
        )
        mock_pusher.return_value.trigger.assert_called_once_with(
            "room-AAAA", "vote-updated", {"songId": "s1"}
        )

    @pytest.mark.asyncio
    async def test_client_created_once(self, pusher_settings):
        with patch(f"{PUBLISHER_MODULE}.Pusher") as mock_pusher:
            publisher = PusherEventPublisher(pusher_settings)
            await publisher.publish("room-AAAA", "participant-joined", {})
            await publisher.publish("room-AAAA", "participant-left", {})

        mock_pusher.assert_called_once()
        assert mock_pusher.return_value.trigger.call_count == 2

    @pytest.mark.asyncio
    async def test_tls_flag_passed_through(self):
        settings = PusherSettings(app_id="1", key="k", secret=SecretStr("s"), use_tls=False)

        with patch(f"{PUBLISHER_MODULE}.Pusher") as mock_pusher:
            await PusherEventPublisher(settings).publish("room-AAAA", "queue-updated", {})

        assert mock_pusher.call_args.kwargs["ssl"] is False

    @pytest.mark.asyncio
    async def test_trigger_runs_in_worker_thread(self, pusher_settings):
        """The blocking SDK call does not run on the event loop thread."""
        threads: list[int] = []
        client = MagicMock()
        client.trigger.side_effect = lambda *args: threads.append(threading.get_ident())

        await PusherEventPublisher(pusher_settings, client=client).publish(
            "room-AAAA", "participant-joined", {"totalParticipants": 2}
        )

        assert threads and threads[0] != threading.get_ident()
        client.trigger.assert_called_once_with(
            "room-AAAA", "participant-joined", {"totalParticipants": 2}
        )

    @pytest.mark.asyncio
    async def test_sdk_error_propagates(self, pusher_settings):
        """SDK failures reach the caller, where the broadcaster logs and drops them."""
        client = MagicMock()
        client.trigger.side_effect = PusherBadAuth("invalid signature")

        with pytest.raises(PusherBadAuth):
            await PusherEventPublisher(pusher_settings, client=client).publish(
                "room-AAAA", "participant-left", {}
            )

    @pytest.mark.asyncio
    async def test_oversized_payload_rejected_before_sending(self, pusher_settings):
        """The SDK refuses event data above the Pusher size limit."""
        publisher = PusherEventPublisher(pusher_settings)

        with pytest.raises(ValueError):
            await publisher.publish("room-AAAA", "queue-updated", {"blob": "x" * 20_000})

    @pytest.mark.asyncio
    async def test_aclose_drops_client(self, pusher_settings):
        with patch(f"{PUBLISHER_MODULE}.Pusher") as mock_pusher:
            publisher = PusherEventPublisher(pusher_settings)
            await publisher.publish("room-AAAA", "vote-updated", {})
            await publisher.aclose()
            await publisher.publish("room-AAAA", "vote-updated", {})

        assert mock_pusher.call_count == 2

    @pytest.mark.asyncio
    async def test_aclose_without_client(self, pusher_settings):
        """Closing before any publish is a no-op."""
        await PusherEventPublisher(pusher_settings).aclose()
