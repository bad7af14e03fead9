from pytest import raises

from grouped_list.error import ConfigurationError
from grouped_list.grouping import GroupedEntry, build_grouped, resolve_title


def first_letter_of_last_name(person):
    return person["lastName"][:1]


def last_name(person):
    return person["lastName"]


persons = [
    {"lastName": "Petrov", "firstName": "Boris"},
    {"lastName": "Ivanov", "firstName": "Anna"},
    {"lastName": "Sidorov", "firstName": "Ivan"},
    {"lastName": "Ivanova", "firstName": "Maria"},
    {"lastName": "Petrova", "firstName": "Olga"},
]


def describe_build_grouped():
    def groups_an_empty_collection():
        assert build_grouped([], first_letter_of_last_name, last_name) == []

    def groups_by_first_letter():
        items = [
            {"lastName": "Ivanov", "firstName": "A"},
            {"lastName": "Petrov", "firstName": "B"},
        ]
        assert build_grouped(items, first_letter_of_last_name, last_name) == [
            ("I", ["Ivanov"]),
            ("P", ["Petrov"]),
        ]

    def returns_grouped_entries():
        result = build_grouped(persons, first_letter_of_last_name, last_name)
        assert all(isinstance(entry, GroupedEntry) for entry in result)
        entry = result[0]
        assert entry.title == "I"
        assert entry.items == ["Ivanov", "Ivanova"]

    def sorts_groups_and_items():
        items = [{"lastName": "Smith"}, {"lastName": "Adams"}, {"lastName": "Smith2"}]
        result = build_grouped(items, first_letter_of_last_name, last_name)
        assert [entry.title for entry in result] == ["A", "S"]
        assert result == [("A", ["Adams"]), ("S", ["Smith", "Smith2"])]

    def sorts_rendered_items_not_records():
        def render(person):
            return f"{person['firstName']} {person['lastName']}"

        result = build_grouped(persons, first_letter_of_last_name, render)
        assert result == [
            ("I", ["Anna Ivanov", "Maria Ivanova"]),
            ("P", ["Boris Petrov", "Olga Petrova"]),
            ("S", ["Ivan Sidorov"]),
        ]

    def compares_by_code_point():
        items = ["b", "B", "a", "A", "é", "Z"]

        def same_group(_item):
            return "all"

        def by_itself(item):
            return item

        assert build_grouped(items, same_group, by_itself) == [
            ("all", ["A", "B", "Z", "a", "b", "é"])
        ]
        result = build_grouped(items, by_itself, by_itself)
        assert [title for title, _items in result] == ["A", "B", "Z", "a", "b", "é"]

    def keeps_duplicates():
        items = [{"lastName": "Ivanov"}, {"lastName": "Ivanov"}]
        assert build_grouped(items, first_letter_of_last_name, last_name) == [
            ("I", ["Ivanov", "Ivanov"])
        ]

    def sorts_by_resolved_titles():
        items = [
            {"lastName": "Ivanov", "firstName": "A"},
            {"lastName": "Petrov", "firstName": "B"},
        ]
        result = build_grouped(
            items, first_letter_of_last_name, last_name, {"I": "Group I"}
        )
        assert result == [("Group I", ["Ivanov"]), ("P", ["Petrov"])]

        result = build_grouped(
            items, first_letter_of_last_name, last_name, {"I": "Zeta group"}
        )
        assert result == [("P", ["Petrov"]), ("Zeta group", ["Ivanov"])]

    def keeps_encounter_order_for_equal_titles():
        regions = [
            {"name": "Moscow", "fedreg": "8"},
            {"name": "Adygea", "fedreg": "9"},
            {"name": "Tver", "fedreg": "8"},
        ]
        title_map = {"8": "Federal district", "9": "Federal district"}

        def fedreg(region):
            return region["fedreg"]

        def name(region):
            return region["name"]

        assert build_grouped(regions, fedreg, name, title_map) == [
            ("Federal district", ["Moscow", "Tver"]),
            ("Federal district", ["Adygea"]),
        ]
        reordered = [regions[1], regions[0], regions[2]]
        assert build_grouped(reordered, fedreg, name, title_map) == [
            ("Federal district", ["Adygea"]),
            ("Federal district", ["Moscow", "Tver"]),
        ]

    def looks_up_titles_of_non_string_labels():
        def by_fedreg(region):
            return region["fedreg"]

        def name(region):
            return region["name"]

        regions = [
            {"name": "Tver", "fedreg": 8},
            {"name": "Moscow", "fedreg": 8},
            {"name": "Adygea", "fedreg": 2},
        ]
        assert build_grouped(regions, by_fedreg, name, {"8": "Central"}) == [
            ("2", ["Adygea"]),
            ("Central", ["Moscow", "Tver"]),
        ]

    def merges_labels_with_the_same_string():
        def k(item):
            return item["k"]

        def v(item):
            return item["v"]

        items = [{"k": 1, "v": "b"}, {"k": "1", "v": "a"}]
        assert build_grouped(items, k, v) == [("1", ["a", "b"])]

    def is_deterministic():
        title_map = {"P": "Persons starting with P"}
        first = build_grouped(persons, first_letter_of_last_name, last_name, title_map)
        second = build_grouped(persons, first_letter_of_last_name, last_name, title_map)
        assert first == second
        assert first is not second

    def does_not_modify_the_records():
        items = [{"lastName": "Petrov"}, {"lastName": "Ivanov"}]
        build_grouped(items, first_letter_of_last_name, last_name)
        assert items == [{"lastName": "Petrov"}, {"lastName": "Ivanov"}]

    def fails_if_key_function_fails():
        items = [{"lastName": "Ivanov"}, {"firstName": "Boris"}]
        with raises(ConfigurationError) as exc_info:
            build_grouped(items, first_letter_of_last_name, last_name)
        error = exc_info.value
        assert isinstance(error.original_error, KeyError)
        assert error.__cause__ is error.original_error
        assert error.message == (
            "The key function failed for {'firstName': 'Boris'}: 'lastName'"
        )

    def converts_unhashable_labels_to_strings():
        def initials(_item):
            return ["I"]

        assert build_grouped(persons[:1], initials, last_name) == [
            ("['I']", ["Petrov"])
        ]

    def fails_if_a_title_is_not_a_string():
        def k(item):
            return item["k"]

        items = [{"k": "a"}, {"k": "b"}]
        with raises(ConfigurationError) as exc_info:
            build_grouped(items, k, k, {"a": 5})
        assert str(exc_info.value) == "Expected a string title for group 'a', got 5."

    def fails_if_format_function_fails():
        def first_name(person):
            return person["firstName"]

        items = [{"lastName": "Ivanov", "firstName": "Anna"}, {"lastName": "Petrov"}]
        with raises(ConfigurationError) as exc_info:
            build_grouped(items, first_letter_of_last_name, first_name)
        error = exc_info.value
        assert isinstance(error.original_error, KeyError)
        assert error.message == (
            "The format function failed for {'lastName': 'Petrov'}: 'firstName'"
        )

    def fails_if_format_function_does_not_return_a_string():
        def tweets(_person):
            return 42

        with raises(ConfigurationError) as exc_info:
            build_grouped(persons[:1], first_letter_of_last_name, tweets)
        assert str(exc_info.value) == (
            "The format function must return a string, but returned 42"
            " for {'lastName': 'Petrov', 'firstName': 'Boris'}."
        )


def describe_resolve_title():
    def uses_label_without_title_map():
        assert resolve_title("I") == "I"
        assert resolve_title("I", None) == "I"
        assert resolve_title("I", {}) == "I"

    def uses_title_from_title_map():
        assert resolve_title("1", {"1": "Far Eastern"}) == "Far Eastern"

    def falls_back_to_label_if_missing_or_empty():
        assert resolve_title("2", {"1": "Far Eastern"}) == "2"
        assert resolve_title("2", {"2": ""}) == "2"

    def converts_non_string_labels():
        assert resolve_title(3) == "3"
        assert resolve_title(None) == "None"
        assert resolve_title(3, {"3": "Krais"}) == "Krais"
        assert resolve_title(3, {3: "Krais"}) == "3"  # type: ignore

    def fails_if_title_is_not_a_string():
        with raises(ConfigurationError) as exc_info:
            resolve_title(8, {"8": ["Central"]})
        assert exc_info.value.message == (
            "Expected a string title for group '8', got ['Central']."
        )
