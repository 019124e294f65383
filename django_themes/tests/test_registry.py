from __future__ import annotations

import threading

from django.test import SimpleTestCase

from django_themes import BaseBlock, BaseTheme, InvalidImplementation
from django_themes.registry import BlockRegistry
from django_themes.tests.fixtures.blocks.cta import CtaBlock
from django_themes.tests.fixtures.blocks.features import FeaturesBlock
from django_themes.tests.fixtures.blocks.hero import HeroBlock
from django_themes.tests.fixtures.blocks.marketing import MarketingBlock


class CountingBlock(BaseBlock):
    constructed = 0

    def __init__(self):
        type(self).constructed += 1


class GalleryBlock(CountingBlock):
    block_type = "gallery"
    block_name = "Gallery"
    block_category = "Media"
    block_component = "Blocks/Gallery"


class VideoBlock(CountingBlock):
    block_type = "video"
    block_name = "Video"
    block_category = "Media"
    block_component = "Blocks/Video"


class AlternateHeroBlock(BaseBlock):
    block_type = "hero"
    block_name = "Alternate Hero"
    block_component = "Blocks/AltHero"


class QuoteBlock(BaseBlock):
    block_type = "quote"
    block_name = "Quote"
    _defaults = {"text": "Default quote", "tags": ["testimonial"]}

    def default_content(self):
        return self._defaults


class PlainTheme(BaseTheme):
    def name(self):
        return "Plain"

    def colors(self):
        return {}


class BlockRegistryTests(SimpleTestCase):
    def setUp(self):
        GalleryBlock.constructed = 0
        VideoBlock.constructed = 0
        self.registry = BlockRegistry()

    def test_register_keys_by_declared_type(self):
        self.registry.register(HeroBlock)
        self.assertTrue(self.registry.has("hero"))
        self.assertEqual(self.registry.types(), ["hero"])
        self.assertIsInstance(self.registry.get("hero"), HeroBlock)

    def test_register_builds_one_instance_and_caches_it(self):
        self.registry.register(GalleryBlock)
        self.assertEqual(GalleryBlock.constructed, 1)
        first = self.registry.get("gallery")
        second = self.registry.get("gallery")
        self.assertIs(first, second)
        self.assertEqual(GalleryBlock.constructed, 1)

    def test_register_accepts_dotted_path(self):
        self.registry.register("django_themes.tests.fixtures.blocks.hero.HeroBlock")
        self.assertIsInstance(self.registry.get("hero"), HeroBlock)

    def test_last_registration_wins(self):
        self.registry.register_many([HeroBlock, CtaBlock, AlternateHeroBlock])
        self.assertEqual(self.registry.types(), ["hero", "cta"])
        self.assertIsInstance(self.registry.get("hero"), AlternateHeroBlock)

    def test_get_unknown_type_returns_none(self):
        self.assertIsNone(self.registry.get("missing"))

    def test_rejects_non_block_class(self):
        with self.assertRaises(InvalidImplementation):
            self.registry.register(PlainTheme)

    def test_rejects_abstract_block(self):
        with self.assertRaises(InvalidImplementation):
            self.registry.register(MarketingBlock)

    def test_rejects_instance_and_unknown_path(self):
        with self.assertRaises(InvalidImplementation):
            self.registry.register(HeroBlock())
        with self.assertRaises(InvalidImplementation):
            self.registry.register("django_themes.tests.fixtures.blocks.hero.MissingBlock")

    def test_register_many_aborts_on_first_failure_and_keeps_earlier(self):
        with self.assertRaises(InvalidImplementation):
            self.registry.register_many([HeroBlock, PlainTheme, CtaBlock])
        self.assertEqual(self.registry.types(), ["hero"])

    def test_all_fills_cache_gaps_in_registration_order(self):
        self.registry.register_many([GalleryBlock, VideoBlock])
        # Drop cached instances to simulate entries that were never built.
        self.registry._instances.clear()
        blocks = self.registry.all()
        self.assertEqual(list(blocks), ["gallery", "video"])
        self.assertEqual(GalleryBlock.constructed, 2)
        self.assertEqual(VideoBlock.constructed, 2)

    def test_list_serializes_every_block(self):
        self.registry.register(HeroBlock)
        self.assertEqual(
            self.registry.list(),
            [
                {
                    "type": "hero",
                    "name": "Hero Section",
                    "category": "Layout",
                    "icon": "M4 6h16M4 12h16M4 18h16",
                    "component": "Blocks/Hero",
                    "contentSchema": {
                        "headline": {"type": "text", "label": "Headline"},
                        "subline": {"type": "textarea", "label": "Subline"},
                    },
                    "settingsSchema": {"fullHeight": {"type": "boolean", "label": "Full height"}},
                    "defaultContent": {
                        "headline": "Welcome to our site",
                        "subline": "Discover amazing features",
                    },
                    "defaultSettings": {"fullHeight": False},
                }
            ],
        )

    def test_by_category_groups_records(self):
        self.registry.register_many([HeroBlock, CtaBlock, FeaturesBlock, GalleryBlock, VideoBlock])
        grouped = self.registry.by_category()
        self.assertEqual(list(grouped), ["Layout", "Marketing", "Content", "Media"])
        self.assertEqual([b["type"] for b in grouped["Media"]], ["gallery", "video"])
        self.assertEqual(grouped["Marketing"][0]["name"], "Call to Action")

    def test_default_content_and_component_helpers(self):
        self.registry.register(CtaBlock)
        self.assertEqual(self.registry.default_content("cta"), {"label": "Sign up", "url": "/signup"})
        self.assertEqual(self.registry.default_content("missing"), {})
        self.assertEqual(self.registry.component("cta"), "Blocks/Cta")
        self.assertIsNone(self.registry.component("missing"))

    def test_default_content_is_a_copy(self):
        self.registry.register(QuoteBlock)
        content = self.registry.default_content("quote")
        content["text"] = "Edited"
        content["tags"].append("homepage")
        self.assertEqual(
            self.registry.default_content("quote"),
            {"text": "Default quote", "tags": ["testimonial"]},
        )

    def test_base_block_defaults(self):
        block = FeaturesBlock()
        self.assertEqual(block.category(), "Content")
        self.assertEqual(block.content_schema(), {})
        self.assertEqual(block.default_settings(), {})


class LazyResolutionConcurrencyTests(SimpleTestCase):
    def test_concurrent_first_access_builds_one_instance(self):
        registry = BlockRegistry()
        registry.register(GalleryBlock)
        registry._instances.clear()
        GalleryBlock.constructed = 0

        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(registry.get("gallery"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(GalleryBlock.constructed, 1)
        self.assertEqual(len({id(block) for block in results}), 1)
