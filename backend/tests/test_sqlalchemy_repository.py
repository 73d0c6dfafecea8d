import unittest

from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.schema import CreateTable

from _test_utils import make_sqlite_repository
from review_service.models.base import Base
from review_service.models.review import Review
from review_service.repositories.base import ReviewNotFoundError


class SqlAlchemyReviewRepositoryTests(unittest.TestCase):
    def setUp(self):
        self.repo = make_sqlite_repository()

    def _add(self, media_id=7, user_id=3, content="great", rating=9):
        review = Review(media_id=media_id, user_id=user_id, content=content, rating=rating)
        self.repo.create(review)
        return review

    def test_create_assigns_id_and_timestamps(self):
        first = self._add()
        second = self._add()
        self.assertEqual(first.id, 1)
        self.assertEqual(second.id, 2)
        self.assertIsNotNone(first.created_at)
        self.assertIsNotNone(first.updated_at)

    def test_rating_defaults_to_zero(self):
        review = Review(media_id=1, user_id=1, content="no rating")
        self.repo.create(review)
        self.assertEqual(self.repo.get_by_id(review.id).rating, 0)

    def test_get_by_id_returns_detached_copy(self):
        created = self._add()
        fetched = self.repo.get_by_id(created.id)
        self.assertEqual(fetched.content, "great")
        self.assertEqual(fetched.created_at, created.created_at)

    def test_get_by_id_missing_raises_not_found(self):
        with self.assertRaises(ReviewNotFoundError) as exc:
            self.repo.get_by_id(12)
        self.assertEqual(exc.exception.review_id, 12)

    def test_update_overwrites_row(self):
        created = self._add()
        fetched = self.repo.get_by_id(created.id)
        fetched.content = "changed"
        fetched.rating = 2
        self.repo.update(fetched)
        stored = self.repo.get_by_id(created.id)
        self.assertEqual(stored.content, "changed")
        self.assertEqual(stored.rating, 2)
        self.assertIsNotNone(fetched.updated_at)

    def test_update_missing_row_raises_not_found(self):
        ghost = Review(id=50, media_id=1, user_id=1, content="x", rating=1)
        with self.assertRaises(ReviewNotFoundError):
            self.repo.update(ghost)

    def test_delete_removes_row_and_id_is_not_reused(self):
        created = self._add()
        self.repo.delete(created.id)
        with self.assertRaises(ReviewNotFoundError):
            self.repo.get_by_id(created.id)
        self.assertEqual(self._add().id, created.id + 1)

    def test_filtered_scans(self):
        self._add(media_id=1, user_id=10, rating=5)
        self._add(media_id=1, user_id=11, rating=6)
        self._add(media_id=2, user_id=10, rating=5)
        self.assertEqual([r.id for r in self.repo.get_all()], [1, 2, 3])
        self.assertEqual([r.id for r in self.repo.get_by_rating(5)], [1, 3])
        self.assertEqual([r.id for r in self.repo.get_by_user(11)], [2])
        self.assertEqual([r.id for r in self.repo.get_by_media(1)], [1, 2])
        self.assertEqual(self.repo.get_by_media(99), [])

    def test_large_ids_round_trip(self):
        created = self._add(media_id=2**40, user_id=2**62)
        stored = self.repo.get_by_id(created.id)
        self.assertEqual(stored.media_id, 2**40)
        self.assertEqual(stored.user_id, 2**62)
        self.assertEqual([r.id for r in self.repo.get_by_media(2**40)], [created.id])

    def test_postgresql_columns_are_64_bit(self):
        ddl = str(CreateTable(Review.__table__).compile(dialect=postgresql.dialect()))
        self.assertIn("id BIGSERIAL", ddl)
        self.assertIn("media_id BIGINT", ddl)
        self.assertIn("user_id BIGINT", ddl)

    def test_engine_failure_propagates(self):
        engine = self.repo._session_factory.kw["bind"]
        Base.metadata.drop_all(engine)
        with self.assertLogs("review_service.repositories", level="ERROR"):
            with self.assertRaises(SQLAlchemyError):
                self.repo.get_all()


if __name__ == "__main__":
    unittest.main()
