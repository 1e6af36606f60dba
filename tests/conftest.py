import pytest
from django.test import Client

from tests.factories import PostFactory


@pytest.fixture
def client():
    return Client()


@pytest.fixture
def post(db):
    return PostFactory(title="Original title", body="Original body text that is long enough")
