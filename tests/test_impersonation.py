"""Impersonation: switch, run, restore, under every exit path."""

from __future__ import annotations

import os
import threading

import pytest

from paramcore.adapters.memory import FakeIdentity
from paramcore.adapters.system.identity import PosixIdentity, is_privileged
from paramcore.application.impersonation import as_user, impersonate, resolve_uid
from paramcore.domain.errors import UnknownUserError


@pytest.mark.os_agnostic
def test_work_runs_under_target_uid_and_uid_is_restored(fake_identity: FakeIdentity) -> None:
    """The body sees the target uid; the caller's uid comes back afterwards."""
    observed = as_user("root", fake_identity.effective_uid, identity=fake_identity)

    assert observed == 0
    assert fake_identity.effective_uid() == 1000
    assert fake_identity.switches == [0, 1000]


@pytest.mark.os_agnostic
def test_result_of_work_is_returned(fake_identity: FakeIdentity) -> None:
    """as_user passes the work's return value through."""
    assert as_user("bob", lambda: "done", identity=fake_identity) == "done"


@pytest.mark.os_agnostic
def test_uid_is_restored_when_work_raises(fake_identity: FakeIdentity) -> None:
    """A failing body still restores the previous uid and the error propagates."""

    def boom() -> None:
        raise RuntimeError("work failed")

    with pytest.raises(RuntimeError, match="work failed"):
        as_user("bob", boom, identity=fake_identity)

    assert fake_identity.effective_uid() == 1000
    assert fake_identity.switches == [1001, 1000]


@pytest.mark.os_agnostic
def test_unknown_user_fails_before_any_switch(fake_identity: FakeIdentity) -> None:
    """The lookup error is chained and no uid change happens."""
    with pytest.raises(UnknownUserError, match="User ghost not found") as excinfo:
        as_user("ghost", lambda: None, identity=fake_identity)

    assert isinstance(excinfo.value.__cause__, KeyError)
    assert fake_identity.switches == []


@pytest.mark.os_agnostic
def test_same_uid_runs_without_switching(fake_identity: FakeIdentity) -> None:
    """Impersonating the current identity is a plain call."""
    with impersonate("alice", identity=fake_identity) as uid:
        assert uid == 1000

    assert fake_identity.switches == []


@pytest.mark.os_agnostic
def test_nested_impersonation_unwinds_in_reverse(fake_identity: FakeIdentity) -> None:
    """Inner switches restore to the outer identity, outer to the original."""
    with impersonate("root", identity=fake_identity):
        with impersonate("bob", identity=fake_identity):
            assert fake_identity.effective_uid() == 1001
        assert fake_identity.effective_uid() == 0

    assert fake_identity.switches == [0, 1001, 0, 1000]


@pytest.mark.os_agnostic
def test_resolve_uid_returns_numeric_uid(fake_identity: FakeIdentity) -> None:
    """resolve_uid is the bare lookup used before switching."""
    assert resolve_uid("bob", identity=fake_identity) == 1001


@pytest.mark.os_agnostic
def test_concurrent_impersonations_are_serialised() -> None:
    """Two threads never observe each other's uid inside their bodies."""
    identity = FakeIdentity(users={"alice": 1000, "bob": 1001, "carol": 1002}, euid=0)
    mismatches: list[tuple[str, int]] = []

    def worker(username: str, expected: int) -> None:
        for _ in range(100):
            with impersonate(username, identity=identity):
                if identity.effective_uid() != expected:
                    mismatches.append((username, identity.effective_uid()))

    threads = [
        threading.Thread(target=worker, args=(name, uid))
        for name, uid in (("alice", 1000), ("bob", 1001), ("carol", 1002))
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert mismatches == []
    assert identity.effective_uid() == 0


# ======================== PosixIdentity ========================


class _RecordingPosixIdentity(PosixIdentity):
    def __init__(self) -> None:
        self.switches: list[int] = []

    def set_effective_uid(self, uid: int) -> None:
        self.switches.append(uid)
        super().set_effective_uid(uid)


@pytest.mark.posix_only
@pytest.mark.skipif(os.name != "posix", reason="needs the password database")
def test_posix_unknown_user_is_reported_as_unknown_user() -> None:
    """The password database KeyError is chained, never raised on its own."""
    with pytest.raises(UnknownUserError) as excinfo:
        as_user("paramcore-no-such-user-x9", lambda: None, identity=PosixIdentity())

    assert isinstance(excinfo.value.__cause__, KeyError)


@pytest.mark.posix_only
@pytest.mark.skipif(os.name != "posix", reason="needs effective uids")
def test_posix_current_user_runs_work_without_switching() -> None:
    """Impersonating the running user is a plain call on a real system."""
    import pwd

    identity = _RecordingPosixIdentity()
    current = pwd.getpwuid(os.geteuid()).pw_name

    assert as_user(current, lambda: "ran", identity=identity) == "ran"
    assert identity.switches == []
    assert identity.effective_uid() == os.geteuid()


@pytest.mark.posix_only
@pytest.mark.skipif(os.name != "posix", reason="needs effective uids")
def test_is_privileged_follows_effective_uid() -> None:
    assert is_privileged() is (os.geteuid() == 0)
