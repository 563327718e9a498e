"""
Tests for query parsing, the filter chain and sort strategies.
"""

import unittest

from folio.models import ContentItem, ContentKind, FilterRequest
from folio.query import (
    AndPredicate,
    DecorationPredicate,
    FilterHandler,
    KeywordPredicate,
    KindPredicate,
    LockPredicate,
    MatchAll,
    QueryParser,
    SearchFilterHandler,
    SortByDate,
    SortByDescriptionLength,
    SortByTitle,
    Sorter,
    TagFilterHandler,
    TypeFilterHandler,
    build_filter_chain,
    filter_items,
    get_sort_strategy,
    parse_date,
    parse_query,
    tokenize,
)


SAAS_VIDEO = ContentItem(
    id="video-1",
    kind="video",
    title="Building a SaaS in a Weekend",
    description="Live coding session",
    date="2023-11-14",
    meta=["SaaS"],
    decorations=["popular", "hot"]
)

FEATURED_PROJECT = ContentItem(
    id="proj-1",
    kind="project",
    title="E-Commerce Dashboard",
    description="Manage products and orders",
    date="2023-08-15",
    meta=["Next.js", "Supabase"],
    decorations=["featured"]
)

LOCKED_PROJECT = ContentItem(
    id="proj-4",
    kind="project",
    title="Merchant Portal",
    description="Private SaaS back office",
    date="2024-02-01",
    meta=["SaaS", "Django"],
    is_locked=True
)

BLOG_POST = ContentItem(
    id="blog-1",
    kind="blog",
    title="My Journey into Tech",
    description="How I started coding",
    date="2023-01-20",
    meta=["Personal"]
)

ALL_ITEMS = [SAAS_VIDEO, FEATURED_PROJECT, LOCKED_PROJECT, BLOG_POST]


class RecordingHandler(FilterHandler):
    """Accepts everything and records that it was reached."""

    def __init__(self):
        super().__init__()
        self.calls = 0

    def check(self, item, request):
        self.calls += 1
        return True


class TestQueryParser(unittest.TestCase):
    """Test the query language."""

    def setUp(self):
        self.parser = QueryParser()

    def matching(self, query):
        predicate = self.parser.parse(query)
        return [item.id for item in ALL_ITEMS if predicate(item)]

    def test_tokenize(self):
        """Test whitespace splitting without empty tokens."""
        self.assertEqual(tokenize("  type:video   saas \t"), ["type:video", "saas"])
        self.assertEqual(tokenize(""), [])

    def test_empty_query_matches_everything(self):
        """Test that blank queries parse to the constant-true predicate."""
        self.assertIsInstance(self.parser.parse(""), MatchAll)
        self.assertIsInstance(self.parser.parse("   "), MatchAll)
        self.assertEqual(len(self.matching("  ")), len(ALL_ITEMS))

    def test_token_classification(self):
        """Test the predicate built for each token form."""
        self.assertIsInstance(self.parser.parse_token("type:video"), KindPredicate)
        self.assertIsInstance(self.parser.parse_token("is:featured"), DecorationPredicate)
        self.assertIsInstance(self.parser.parse_token("is:locked"), LockPredicate)
        self.assertIsInstance(self.parser.parse_token("react"), KeywordPredicate)
        self.assertIsInstance(self.parser.parse_token("lang:python"), KeywordPredicate)
        self.assertIsInstance(self.parser.parse_token("type:"), KeywordPredicate)

    def test_tokens_fold_left_with_and(self):
        """Test the shape of a multi-token predicate."""
        predicate = self.parser.parse("a b c")
        self.assertIsInstance(predicate, AndPredicate)
        self.assertIsInstance(predicate.left, AndPredicate)
        self.assertEqual(predicate.right.keyword, "c")

    def test_is_featured(self):
        """Test matching on a decoration."""
        self.assertEqual(self.matching("is:featured"), ["proj-1"])

    def test_type_and_keyword(self):
        """Test implicit AND between a type and a keyword."""
        self.assertEqual(self.matching("type:video saas"), ["video-1"])
        self.assertEqual(self.matching("TYPE:Project saas"), ["proj-4"])

    def test_keyword_case_insensitive(self):
        """Test keyword matching in title or description."""
        self.assertEqual(self.matching("SAAS"), ["video-1", "proj-4"])
        self.assertEqual(self.matching("coding"), ["video-1", "blog-1"])

    def test_lock_tokens(self):
        """Test the special is:locked and is:unlocked values."""
        self.assertEqual(self.matching("is:locked"), ["proj-4"])
        self.assertEqual(self.matching("is:unlocked type:project"), ["proj-1"])

    def test_unknown_decoration_matches_nothing(self):
        """Test is: with a value outside the badge set."""
        self.assertEqual(self.matching("is:archived"), [])

    def test_unknown_prefix_is_keyword(self):
        """Test that unknown prefixes match literally, colon included."""
        item = ContentItem(id="doc-1", kind="doc", title="Using lang:python in queries")
        self.assertTrue(parse_query("lang:python")(item))
        self.assertFalse(parse_query("lang:python")(BLOG_POST))


class TestFilterChain(unittest.TestCase):
    """Test the type -> search -> tag handler chain."""

    def test_type_filter_excludes_regardless_of_query(self):
        """Test that the type handler rejects other kinds."""
        request = FilterRequest(type_filter="project", query="saas", tags={"SaaS"})
        self.assertNotIn(SAAS_VIDEO, filter_items(ALL_ITEMS, request))

    def test_query_type_tokens(self):
        """Test type tokens inside the search query."""
        chain = build_filter_chain()
        self.assertFalse(chain.handle(SAAS_VIDEO, FilterRequest(query="type:project")))
        self.assertTrue(chain.handle(SAAS_VIDEO, FilterRequest(query="type:video")))

    def test_tag_filter_requires_any_tag(self):
        """Test at-least-one tag semantics."""
        request = FilterRequest(tags={"Django", "Personal"})
        self.assertEqual([item.id for item in filter_items(ALL_ITEMS, request)],
                         ["proj-4", "blog-1"])

    def test_empty_request_keeps_everything(self):
        """Test that an empty request passes all items in order."""
        self.assertEqual(filter_items(ALL_ITEMS, FilterRequest()), ALL_ITEMS)

    def test_combined_request(self):
        """Test all three stages together."""
        request = FilterRequest(type_filter=ContentKind.PROJECT, query="saas", tags={"SaaS"})
        self.assertEqual(filter_items(ALL_ITEMS, request), [LOCKED_PROJECT])

    def test_rejection_short_circuits(self):
        """Test that a rejecting handler never calls the next one."""
        head = TypeFilterHandler()
        recorder = RecordingHandler()
        head.set_next(recorder)

        self.assertFalse(head.handle(SAAS_VIDEO, FilterRequest(type_filter="blog")))
        self.assertEqual(recorder.calls, 0)

        self.assertTrue(head.handle(BLOG_POST, FilterRequest(type_filter="blog")))
        self.assertEqual(recorder.calls, 1)

    def test_set_next_returns_handler(self):
        """Test fluent linking of handlers."""
        head = TypeFilterHandler()
        search = SearchFilterHandler()
        tags = TagFilterHandler()
        self.assertIs(head.set_next(search), search)
        self.assertIs(search.set_next(tags), tags)

    def test_search_handler_reparses_new_query(self):
        """Test that the parsed query follows the request."""
        handler = SearchFilterHandler()
        self.assertTrue(handler.handle(SAAS_VIDEO, FilterRequest(query="weekend")))
        self.assertFalse(handler.handle(SAAS_VIDEO, FilterRequest(query="journey")))


class TestSortStrategies(unittest.TestCase):
    """Test the interchangeable sort strategies."""

    def test_parse_date(self):
        """Test day parsing of dates and datetimes."""
        self.assertEqual(parse_date("2024-03-05T10:00:00Z").isoformat(), "2024-03-05")
        self.assertIsNone(parse_date(""))
        self.assertIsNone(parse_date("yesterday"))

    def test_sort_by_date_newest_first(self):
        """Test descending date order."""
        result = SortByDate().sort(ALL_ITEMS)
        self.assertEqual([item.id for item in result],
                         ["proj-4", "video-1", "proj-1", "blog-1"])

    def test_sort_by_date_is_stable_and_idempotent(self):
        """Test that sorting twice yields the same sequence."""
        twins = [
            ContentItem(id="a", kind="doc", title="A", date="2024-01-01"),
            ContentItem(id="b", kind="doc", title="B", date="2024-01-01"),
            ContentItem(id="c", kind="doc", title="C", date="2024-02-01"),
        ]
        once = SortByDate().sort(twins)
        self.assertEqual([item.id for item in once], ["c", "a", "b"])
        self.assertEqual(SortByDate().sort(once), once)

    def test_undated_items_sort_last(self):
        """Test that items without a usable date go to the end."""
        items = [
            ContentItem(id="undated", kind="doc", title="U"),
            ContentItem(id="dated", kind="doc", title="D", date="2020-01-01"),
        ]
        self.assertEqual([item.id for item in SortByDate().sort(items)], ["dated", "undated"])

    def test_sort_by_title(self):
        """Test case-insensitive alphabetical order."""
        items = [
            ContentItem(id="1", kind="blog", title="banana"),
            ContentItem(id="2", kind="blog", title="Apple"),
            ContentItem(id="3", kind="blog", title="cherry"),
        ]
        self.assertEqual([item.title for item in SortByTitle().sort(items)],
                         ["Apple", "banana", "cherry"])

    def test_sort_by_description_length(self):
        """Test longest description first, ties in original order."""
        items = [
            ContentItem(id="short", kind="doc", title="S", description="ab"),
            ContentItem(id="long", kind="doc", title="L", description="abcdef"),
            ContentItem(id="tie", kind="doc", title="T", description="cd"),
        ]
        self.assertEqual([item.id for item in SortByDescriptionLength().sort(items)],
                         ["long", "short", "tie"])

    def test_sort_does_not_mutate_input(self):
        """Test that strategies return new lists."""
        items = list(ALL_ITEMS)
        result = SortByTitle().sort(items)
        self.assertEqual(items, ALL_ITEMS)
        self.assertIsNot(result, items)

    def test_sorter_swaps_strategy(self):
        """Test switching strategies on the context."""
        sorter = Sorter()
        self.assertIsInstance(sorter.strategy, SortByDate)

        sorter.set_strategy(get_sort_strategy("title"))
        self.assertEqual(sorter.sort(ALL_ITEMS)[0].id, "video-1")

    def test_unknown_strategy_falls_back_to_date(self):
        """Test the lookup fallback."""
        self.assertIsInstance(get_sort_strategy("popularity"), SortByDate)
        self.assertIsInstance(get_sort_strategy("Description"), SortByDescriptionLength)


if __name__ == '__main__':
    unittest.main()
