"""
Tests for entity wrappers.
"""

from dataclasses import dataclass

from unravel import (
    Err,
    ErrorKind,
    Ok,
    entity,
    from_factory,
    lazy,
    locate,
    number,
    record,
    string,
    to_pydantic,
)


@dataclass
class User:
    name: str
    score: float

    def format_name(self):
        return f"name: {self.name}"


UserT = record({"name": string, "score": number})


class TestEntity:
    def test_decodes_to_instance(self):
        UserD = entity(UserT, User)
        result = UserD.decode({"name": "John", "score": 42})

        assert result == Ok(User(name="John", score=42))
        assert result.value.format_name() == "name: John"

    def test_instances_pass_through(self):
        user = User(name="John", score=42)
        assert entity(UserT, User).decode(user).value is user

    def test_failure_keeps_report(self):
        result = entity(UserT, User).decode({"name": "John"})
        assert isinstance(result, Err)
        assert "score" in result.error

    def test_nested_entities(self):
        @dataclass
        class Post:
            title: str
            author: User

        PostD = entity(
            record({"title": string, "author": lazy(lambda: entity(UserT, User))}),
            Post,
        )
        post = PostD.decode({"title": "Hi", "author": {"name": "Ann", "score": 1}})

        assert post.value.author == User(name="Ann", score=1)
        assert locate(PostD, ("author", "name")) is string

    def test_pydantic_model_as_entity(self):
        Model = to_pydantic("UserModel", UserT)
        result = entity(UserT, Model).decode({"name": "John", "score": 42})
        assert result.value.name == "John"

    def test_non_dict_value(self):
        class Name(str):
            pass

        assert entity(string, Name).decode("Ann").value == Name("Ann")


class TestFromFactory:
    def test_factory(self):
        UserD = from_factory(UserT, lambda v: User(**v))
        assert UserD.decode({"name": "A", "score": 1}) == Ok(User(name="A", score=1))


class TestEntityConstruction:
    def test_mismatched_class_becomes_report(self):
        result = entity(record({"name": string}), User).decode({"name": "John"})

        assert isinstance(result, Err)
        assert result.error.kind == ErrorKind.INVALID
        assert result.error.error.message.startswith("Cannot construct User:")
        assert result.error.error.given == {"name": "John"}

    def test_rejecting_constructor_becomes_report(self):
        @dataclass
        class Age:
            years: float

            def __post_init__(self):
                if self.years < 0:
                    raise ValueError("negative age")

        AgeD = entity(record({"years": number}), Age)

        assert AgeD.decode({"years": 3}) == Ok(Age(years=3))
        result = AgeD.decode({"years": -1})
        assert result.error.kind == ErrorKind.INVALID
        assert "negative age" in result.error.error.message
