"""
Unit tests for services.content.
Query composition, ordering and ownership-checked deletes.
"""
import pytest

from forum.core.errors import Forbidden, NotFound, Unauthenticated, ValidationError
from forum.models.post import Post
from forum.models.reply import Reply
from forum.models.subject import Subject
from forum.services import content


pytestmark = pytest.mark.asyncio


async def _subjects():
    return await Subject.all().order_by("id")


class TestSubjects:

    async def test_seeded_once(self, db):
        names = [s.name for s in await content.list_subjects()]
        assert names == ["Mathematics", "Science", "History", "English", "Programming", "Other"]


class TestListPosts:

    async def test_default_sort_is_newest_first(self, db, create_user, subject):
        user, _ = await create_user()
        for i in range(4):
            await content.create_post(user, f"t{i}", "body", subject.id)
        rows = await content.list_posts()
        assert [p.title for p in rows] == ["t3", "t2", "t1", "t0"]
        stamps = [p.created_at for p in rows]
        assert stamps == sorted(stamps, reverse=True)

    async def test_top_sorts_by_reply_count_then_newest(self, db, create_user, subject):
        user, _ = await create_user()
        quiet = await content.create_post(user, "quiet", "body", subject.id)
        busy = await content.create_post(user, "busy", "body", subject.id)
        medium = await content.create_post(user, "medium", "body", subject.id)
        also_quiet = await content.create_post(user, "also quiet", "body", subject.id)
        for _ in range(3):
            await content.create_reply(user, busy.id, "+1")
        await content.create_reply(user, medium.id, "+1")

        rows = await content.list_posts(sort="top")
        assert [p.id for p in rows] == [busy.id, medium.id, also_quiet.id, quiet.id]
        assert [p.reply_count for p in rows] == [3, 1, 0, 0]

    async def test_unknown_sort_rejected(self, db):
        with pytest.raises(ValidationError):
            await content.list_posts(sort="oldest")

    async def test_filters_compose(self, db, create_user):
        alice, _ = await create_user()
        bob, _ = await create_user()
        math, science = (await _subjects())[:2]
        await content.create_post(alice, "Prime numbers", "2, 3, 5", math.id)
        await content.create_post(alice, "Photosynthesis", "plants and PRIMES", science.id)
        await content.create_post(bob, "More primes", "7, 11", math.id)
        await content.create_post(bob, "Fractions", "1/2", math.id)

        assert len(await content.list_posts(subject_id=math.id)) == 3
        assert {p.title for p in await content.list_posts(search="prime")} == {
            "Prime numbers", "Photosynthesis", "More primes",
        }
        assert {p.title for p in await content.list_posts(search="prime", user=alice.username)} == {
            "Prime numbers", "Photosynthesis",
        }
        assert [p.title for p in await content.list_posts(subject_id=math.id, search="prime", user=bob.username)] == [
            "More primes",
        ]
        assert await content.list_posts(user="nobody") == []


class TestCreate:

    async def test_post_records_author(self, db, create_user, subject):
        user, _ = await create_user()
        post = await content.create_post(user, "Hello", "World", subject.id)
        assert post.author_id == user.id
        assert post.author_name == user.username
        assert post.subject_id == subject.id

    async def test_post_unknown_subject(self, db, create_user):
        user, _ = await create_user()
        with pytest.raises(ValidationError) as exc:
            await content.create_post(user, "Hello", "World", 999)
        assert "subject_id" in exc.value.detail["fields"]

    async def test_reply_to_missing_post(self, db, create_user):
        user, _ = await create_user()
        with pytest.raises(NotFound):
            await content.create_reply(user, 999, "hi")

    async def test_replies_oldest_first_and_by_user_newest_first(self, db, create_user, subject):
        alice, _ = await create_user()
        bob, _ = await create_user()
        post = await content.create_post(alice, "Hello", "World", subject.id)
        first = await content.create_reply(bob, post.id, "first")
        await content.create_reply(alice, post.id, "second")
        third = await content.create_reply(bob, post.id, "third")

        assert [r.content for r in await content.list_replies(post.id)] == ["first", "second", "third"]
        assert [r.id for r in await content.list_user_replies(bob.username)] == [third.id, first.id]
        assert await content.list_replies(999) == []


class TestDelete:

    async def test_owner_deletes_post_and_its_replies(self, db, create_user, subject):
        alice, _ = await create_user()
        bob, _ = await create_user()
        post = await content.create_post(alice, "Hello", "World", subject.id)
        await content.create_reply(bob, post.id, "hi")

        await content.delete_post(alice, post.id)
        assert not await Post.filter(id=post.id).exists()
        assert await Reply.filter(post_id=post.id).count() == 0

    async def test_other_user_forbidden(self, db, create_user, subject):
        alice, _ = await create_user()
        bob, _ = await create_user()
        post = await content.create_post(alice, "Hello", "World", subject.id)
        with pytest.raises(Forbidden):
            await content.delete_post(bob, post.id)
        assert await Post.filter(id=post.id).exists()

    async def test_anonymous_unauthenticated(self, db, create_user, subject):
        alice, _ = await create_user()
        post = await content.create_post(alice, "Hello", "World", subject.id)
        with pytest.raises(Unauthenticated):
            await content.delete_post(None, post.id)

    async def test_admin_deletes_anything(self, db, create_user, create_admin, subject):
        alice, _ = await create_user()
        admin, _ = await create_admin()
        post = await content.create_post(alice, "Hello", "World", subject.id)
        reply = await content.create_reply(alice, post.id, "hi")

        await content.delete_reply(admin, reply.id)
        await content.delete_post(admin, post.id)
        assert not await Reply.filter(id=reply.id).exists()
        assert not await Post.filter(id=post.id).exists()

    async def test_reply_ownership(self, db, create_user, subject):
        alice, _ = await create_user()
        bob, _ = await create_user()
        post = await content.create_post(alice, "Hello", "World", subject.id)
        reply = await content.create_reply(bob, post.id, "hi")

        # The post author does not own replies under it
        with pytest.raises(Forbidden):
            await content.delete_reply(alice, reply.id)
        await content.delete_reply(bob, reply.id)
        assert not await Reply.filter(id=reply.id).exists()

    async def test_missing_ids(self, db, create_user):
        alice, _ = await create_user()
        with pytest.raises(NotFound):
            await content.delete_post(alice, 12345)
        with pytest.raises(NotFound):
            await content.delete_reply(alice, 12345)
