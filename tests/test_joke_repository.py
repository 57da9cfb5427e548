import pytest
from sqlalchemy.orm import sessionmaker

from jokes_app.models.entities import Joke
from jokes_app.models.repositories import JokeAlreadyExistsError


def test_get_all(repository):
    assert sorted(joke.Id for joke in repository.get_all()) == [1, 2, 3]


def test_find_by_id(repository):
    joke = repository.find_by_id(1)

    assert joke.JokeAnswer == "To get to the other side."
    assert repository.find_by_id(42) is None


def test_exists(repository):
    assert repository.exists(1)
    assert not repository.exists(42)


def test_add_keeps_caller_id(repository):
    repository.add(Joke(Id=42, JokeQuestion="Q", JokeAnswer="A"))

    assert repository.find_by_id(42).JokeQuestion == "Q"


def test_add_duplicate_id_raises(repository):
    with pytest.raises(JokeAlreadyExistsError) as exc_info:
        repository.add(Joke(Id=1, JokeQuestion="Q", JokeAnswer="A"))

    assert exc_info.value.joke_id == 1
    assert repository.find_by_id(1).JokeQuestion == "Why did the chicken cross the road?"


def test_update_overwrites_all_fields(repository):
    updated = repository.update(Joke(Id=1, JokeQuestion="New Q", JokeAnswer="New A"))

    assert updated is True
    joke = repository.find_by_id(1)
    assert (joke.JokeQuestion, joke.JokeAnswer) == ("New Q", "New A")


def test_update_missing_returns_false(repository):
    assert repository.update(Joke(Id=42, JokeQuestion="Q", JokeAnswer="A")) is False
    assert repository.find_by_id(42) is None


def test_remove(repository):
    assert repository.remove(2) is True
    assert repository.find_by_id(2) is None


def test_remove_missing_is_not_an_error(repository):
    assert repository.remove(42) is False
    assert len(repository.get_all()) == 3


def test_out_of_range_ids_are_absent(repository):
    huge = 10**20

    assert repository.find_by_id(huge) is None
    assert not repository.exists(huge)
    assert repository.remove(huge) is False
    assert repository.update(Joke(Id=huge, JokeQuestion="Q", JokeAnswer="A")) is False


def test_add_loses_race_for_id(repository, db, engine, monkeypatch):
    """A joke stored by another session after the id check is still a conflict."""
    monkeypatch.setattr(repository, "exists", lambda joke_id: False)
    other = sessionmaker(bind=engine)()
    other.add(Joke(Id=50, JokeQuestion="First", JokeAnswer="In"))
    other.commit()
    other.close()

    with pytest.raises(JokeAlreadyExistsError):
        repository.add(Joke(Id=50, JokeQuestion="Second", JokeAnswer="Late"))

    # Session is rolled back and still usable
    assert repository.find_by_id(50).JokeQuestion == "First"
