"""End-to-end tests through the Store and AppState intent facade."""

import pytest

from blogspace.app.state import AppSnapshot, Store
from blogspace.shared.core import events
from blogspace.shared.core.errors import AuthenticationError, FieldValidationError
from blogspace.shared.domain.navigation.coordinator import NavigationTarget, Screen
from tests.conftest import LONG_CONTENT, Recorder


@pytest.mark.asyncio
async def test_startup_lands_on_auth_with_content_loaded(store):
    snapshot = store.app.snapshot()
    assert snapshot.screen == Screen.AUTH
    assert not snapshot.session.is_loading
    assert not snapshot.posts_loading
    assert [p.id for p in snapshot.posts] == ["1", "2"]


@pytest.mark.asyncio
async def test_store_cannot_start_twice(store):
    with pytest.raises(RuntimeError):
        await store.start()


@pytest.mark.asyncio
async def test_fresh_store_is_loading(bus, config):
    store = Store(bus, config)
    snapshot = store.app.snapshot()
    assert snapshot.screen == Screen.LOADING
    assert snapshot.session.is_loading
    assert snapshot.posts_loading


@pytest.mark.asyncio
async def test_login_moves_to_home(store):
    user = await store.app.login("demo@example.com", "password")
    snapshot = store.app.snapshot()
    assert snapshot.screen == Screen.HOME
    assert snapshot.session.user == user


@pytest.mark.asyncio
async def test_failed_login_stays_on_auth(store):
    with pytest.raises(AuthenticationError):
        await store.app.login("demo@example.com", "wrong")
    assert store.app.snapshot().screen == Screen.AUTH


@pytest.mark.asyncio
async def test_register_moves_to_home(store):
    user = await store.app.register("alice")
    snapshot = store.app.snapshot()
    assert snapshot.session.is_authenticated
    assert snapshot.session.user == user
    assert snapshot.screen == Screen.HOME


@pytest.mark.asyncio
async def test_compose_publish_flow(store):
    await store.app.login("demo", "password")
    assert await store.app.navigate("create") == Screen.CREATE

    post_id = await store.app.create_post("My first post", LONG_CONTENT, ["python", "asyncio"])
    snapshot = store.app.snapshot()
    assert snapshot.screen == Screen.HOME
    assert snapshot.posts[0].id == post_id
    assert snapshot.posts[0].author.username == "demo"


@pytest.mark.asyncio
async def test_rejected_post_stays_on_compose(store):
    await store.app.login("demo", "password")
    await store.app.navigate(NavigationTarget.CREATE)

    with pytest.raises(FieldValidationError) as exc_info:
        await store.app.create_post("Hi", "short")

    assert "content" in exc_info.value.fields
    assert store.app.snapshot().screen == Screen.CREATE
    assert len(store.app.snapshot().posts) == 2


@pytest.mark.asyncio
async def test_cancel_compose(store):
    await store.app.login("demo", "password")
    await store.app.navigate("create")
    assert await store.app.navigate("cancel") == Screen.HOME


@pytest.mark.asyncio
async def test_content_intents_require_sign_in(store):
    with pytest.raises(AuthenticationError):
        await store.app.create_post("Anonymous post", LONG_CONTENT)
    with pytest.raises(AuthenticationError):
        await store.app.create_comment("1", "hello")
    assert len(store.content.posts) == 2


@pytest.mark.asyncio
async def test_guard_redirects_anonymous_navigation(store):
    assert await store.app.navigate("home") == Screen.AUTH
    assert await store.app.navigate("create") == Screen.AUTH


@pytest.mark.asyncio
async def test_logout_returns_to_auth(store):
    await store.app.login("demo", "password")
    await store.app.toggle_comments("1")
    await store.app.logout()

    snapshot = store.app.snapshot()
    assert snapshot.screen == Screen.AUTH
    assert snapshot.session.user is None
    assert snapshot.expanded_post_id is None


@pytest.mark.asyncio
async def test_sign_in_request_while_signed_in(store):
    await store.app.login("demo", "password")
    assert await store.app.navigate("auth") == Screen.AUTH
    await store.app.login("johndoe", "password")
    assert store.app.snapshot().screen == Screen.HOME


@pytest.mark.asyncio
async def test_navigation_after_login_survives_settled_bus(store):
    await store.app.login("demo", "password")
    assert await store.app.navigate("auth") == Screen.AUTH
    await store.bus.wait_until_idle()
    assert store.app.snapshot().screen == Screen.AUTH


@pytest.mark.asyncio
async def test_login_then_logout_changes_view_twice(store):
    views = Recorder()
    await store.bus.subscribe(events.TOPIC_VIEW_CHANGED, views)

    await store.app.login("demo", "password")
    await store.app.logout()
    await store.bus.wait_until_idle()

    assert [(p["previous"], p["screen"]) for p in views.payloads] == [
        ("auth", "home"),
        ("home", "auth"),
    ]
    assert store.app.snapshot().screen == Screen.AUTH


@pytest.mark.asyncio
async def test_search_filters_snapshot(store):
    await store.app.login("demo", "password")
    result = await store.app.search("future")
    assert [p.id for p in result] == ["2"]

    snapshot = store.app.snapshot()
    assert snapshot.search_term == "future"
    assert [p.id for p in snapshot.posts] == ["2"]
    assert len(store.content.posts) == 2

    await store.app.search("")
    assert [p.id for p in store.app.snapshot().posts] == ["1", "2"]


@pytest.mark.asyncio
async def test_comment_on_unknown_post_is_kept(store):
    await store.app.login("demo", "password")
    comment_id = await store.app.create_comment("999", "hello")
    assert [c.id for c in store.app.comments_for("999")] == [comment_id]


@pytest.mark.asyncio
async def test_likes_through_app_state(store):
    await store.app.login("demo", "password")
    updated = await store.app.toggle_like("1")
    assert updated.is_liked and updated.likes == 25
    assert await store.app.toggle_like("404") is None

    comment = await store.app.toggle_comment_like("1")
    assert comment.is_liked and comment.likes == 6


@pytest.mark.asyncio
async def test_toggle_comments_expands_one_thread(store):
    await store.app.login("demo", "password")
    assert await store.app.toggle_comments("1") == "1"
    assert await store.app.toggle_comments("2") == "2"
    assert await store.app.toggle_comments("2") is None


@pytest.mark.asyncio
async def test_subscribers_receive_snapshots(store):
    recorder = Recorder()
    await store.app.subscribe(recorder)

    await store.app.login("demo", "password")
    await store.app.toggle_like("1")
    await store.bus.wait_until_idle()

    snapshots = [p["snapshot"] for p in recorder.payloads]
    assert snapshots
    assert all(isinstance(s, AppSnapshot) for s in snapshots)
    latest = snapshots[-1]
    assert latest.screen == Screen.HOME
    assert latest.posts[0].is_liked

    await store.app.unsubscribe(recorder)
    count = len(recorder.payloads)
    await store.app.toggle_like("1")
    await store.bus.wait_until_idle()
    assert len(recorder.payloads) == count


@pytest.mark.asyncio
async def test_user_actions_are_published(store):
    recorder = Recorder()
    await store.bus.subscribe(events.TOPIC_USER_ACTION, recorder)

    await store.app.login("demo", "password")
    await store.app.navigate("create")
    await store.bus.wait_until_idle()

    assert [p["action"] for p in recorder.payloads] == ["login", "navigate"]
    assert recorder.payloads[1]["target"] == "create"
