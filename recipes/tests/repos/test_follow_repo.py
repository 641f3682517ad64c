from django.test import TestCase

from recipes.repos.follow_repo import FollowRepo
from recipes.tests.helpers import make_user


class FollowRepoTests(TestCase):
    def setUp(self):
        self.repo = FollowRepo()
        self.alice = make_user(username="alice")
        self.bob = make_user(username="bob")
        self.carol = make_user(username="carol")

    def test_follow_is_idempotent(self):
        first = self.repo.follow(follower_id=self.alice.pk, following_id=self.bob.pk)
        second = self.repo.follow(follower_id=self.alice.pk, following_id=self.bob.pk)
        self.assertEqual(first.pk, second.pk)
        self.assertTrue(self.repo.is_following(follower_id=self.alice.pk, following_id=self.bob.pk))

    def test_unfollow_returns_deleted_count(self):
        self.repo.follow(follower_id=self.alice.pk, following_id=self.bob.pk)
        self.assertEqual(self.repo.unfollow(follower_id=self.alice.pk, following_id=self.bob.pk), 1)
        self.assertEqual(self.repo.unfollow(follower_id=self.alice.pk, following_id=self.bob.pk), 0)

    def test_followers_and_following_lists(self):
        self.repo.follow(follower_id=self.alice.pk, following_id=self.carol.pk)
        self.repo.follow(follower_id=self.bob.pk, following_id=self.carol.pk)
        followers = [row.follower for row in self.repo.followers_of(self.carol.pk)]
        self.assertEqual(set(followers), {self.alice, self.bob})
        following = [row.following for row in self.repo.following_of(self.alice.pk)]
        self.assertEqual(following, [self.carol])

    def test_followed_ids(self):
        self.repo.follow(follower_id=self.alice.pk, following_id=self.bob.pk)
        ids = self.repo.followed_ids(follower_id=self.alice.pk, among=[self.bob.pk, self.carol.pk])
        self.assertEqual(ids, {self.bob.pk})
