import unittest

from gdrivekit.client.query import (
    DEFAULT_PAGE_SIZE,
    ListRequest,
    QueryBuilder,
    build_list_params,
    build_list_query,
    escape_literal,
    files_only_clause,
    folders_only_clause,
)
from gdrivekit.util.mime import FOLDER_MIME


class TestQueryBuilder(unittest.TestCase):
    def test_empty_builder_renders_none(self) -> None:
        self.assertIsNone(QueryBuilder().build())

    def test_single_clause_is_not_wrapped(self) -> None:
        self.assertEqual(QueryBuilder().in_parents("P1").build(), "'P1' in parents")

    def test_clauses_joined_with_and(self) -> None:
        q = QueryBuilder().in_parents("P1").mime_type_is(FOLDER_MIME).not_trashed().build()
        self.assertEqual(
            q,
            f"'P1' in parents and mimeType = '{FOLDER_MIME}' and trashed = false",
        )

    def test_compound_clause_is_parenthesised(self) -> None:
        q = QueryBuilder().raw("name = 'a' or name = 'b'").in_parents("P1").build()
        self.assertEqual(q, "(name = 'a' or name = 'b') and 'P1' in parents")

    def test_blank_raw_clause_ignored(self) -> None:
        self.assertIsNone(QueryBuilder().raw("  ").raw(None).build())

    def test_values_are_escaped(self) -> None:
        self.assertEqual(escape_literal("O'Brien\\x"), "O\\'Brien\\\\x")
        q = QueryBuilder().mime_type_is_not("a'b").build()
        self.assertEqual(q, "mimeType != 'a\\'b'")


class TestBuildListQuery(unittest.TestCase):
    def test_recursive_does_not_restrict_parents(self) -> None:
        q = build_list_query(ListRequest(folder_id="P1"))
        self.assertEqual(q, "trashed = false")

    def test_non_recursive_adds_direct_child_predicate(self) -> None:
        q = build_list_query(ListRequest(folder_id="P1", recursive=False))
        self.assertEqual(q, "'P1' in parents and trashed = false")

    def test_non_recursive_without_folder(self) -> None:
        q = build_list_query(ListRequest(recursive=False))
        self.assertEqual(q, "trashed = false")

    def test_include_removed_drops_trashed_filter(self) -> None:
        q = build_list_query(ListRequest(include_removed=True))
        self.assertIsNone(q)

    def test_user_trashed_clause_wins(self) -> None:
        q = build_list_query(ListRequest(query="trashed = true"))
        self.assertEqual(q, "trashed = true")

    def test_clause_order(self) -> None:
        q = build_list_query(
            ListRequest(
                folder_id="P1",
                recursive=False,
                query="name contains 'report'",
                mime_type_clause=files_only_clause(),
            )
        )
        self.assertEqual(
            q,
            "name contains 'report' and "
            f"mimeType != '{FOLDER_MIME}' and "
            "'P1' in parents and trashed = false",
        )

    def test_folder_clauses(self) -> None:
        self.assertEqual(folders_only_clause(), f"mimeType = '{FOLDER_MIME}'")
        self.assertEqual(files_only_clause(), f"mimeType != '{FOLDER_MIME}'")


class TestBuildListParams(unittest.TestCase):
    def test_defaults(self) -> None:
        params = build_list_params(ListRequest())
        self.assertEqual(params["spaces"], "drive")
        self.assertEqual(params["pageSize"], DEFAULT_PAGE_SIZE)
        self.assertEqual(
            params["fields"],
            "nextPageToken, files(id, name, parents, mimeType, modifiedTime)",
        )
        self.assertEqual(params["q"], "trashed = false")
        self.assertNotIn("pageToken", params)

    def test_page_token_and_custom_fields(self) -> None:
        params = build_list_params(
            ListRequest(page_token="tok", fields="files(id)", include_removed=True)
        )
        self.assertEqual(params["pageToken"], "tok")
        self.assertEqual(params["fields"], "files(id)")
        self.assertNotIn("q", params)

    def test_with_options_returns_copy(self) -> None:
        base = ListRequest(folder_id="P1")
        other = base.with_options(recursive=False)
        self.assertTrue(base.recursive)
        self.assertFalse(other.recursive)
        self.assertEqual(other.folder_id, "P1")


if __name__ == "__main__":
    unittest.main()
