from jokes_app.services.validation import validate_joke


def test_valid_form():
    joke, validation = validate_joke({"Id": "7", "JokeQuestion": "Q?", "JokeAnswer": "A!"})

    assert validation.is_valid
    assert validation.errors == {}
    assert (joke.Id, joke.JokeQuestion, joke.JokeAnswer) == (7, "Q?", "A!")


def test_blank_question_is_rejected():
    joke, validation = validate_joke({"Id": "7", "JokeQuestion": "   ", "JokeAnswer": "A!"})

    assert not validation.is_valid
    assert list(validation.errors) == ["JokeQuestion"]
    assert joke.Id == 7


def test_missing_answer_is_rejected():
    joke, validation = validate_joke({"Id": "7", "JokeQuestion": "Q?", "JokeAnswer": ""})

    assert not validation.is_valid
    assert "JokeAnswer" in validation.errors
    assert joke.JokeQuestion == "Q?"
    assert joke.JokeAnswer is None


def test_missing_id_is_rejected():
    joke, validation = validate_joke({"JokeQuestion": "Q?", "JokeAnswer": "A!"})

    assert not validation.is_valid
    assert "Id" in validation.errors
    assert joke.Id is None


def test_non_numeric_id_is_rejected():
    joke, validation = validate_joke({"Id": "abc", "JokeQuestion": "Q?", "JokeAnswer": "A!"})

    assert not validation.is_valid
    assert "Id" in validation.errors
    assert joke.Id is None


def test_overlong_question_is_rejected():
    _, validation = validate_joke({"Id": "1", "JokeQuestion": "x" * 501, "JokeAnswer": "A!"})

    assert "JokeQuestion" in validation.errors


def test_out_of_range_id_is_rejected():
    joke, validation = validate_joke({"Id": str(2**63), "JokeQuestion": "Q?", "JokeAnswer": "A!"})

    assert not validation.is_valid
    assert "Id" in validation.errors
    assert joke.Id == 2**63
