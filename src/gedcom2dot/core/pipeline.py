from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from gedcom2dot.core.context import RunContext
from gedcom2dot.core.exceptions import Gedcom2DotError, MissingInputError
from gedcom2dot.exporter import DotExporter, DotStyle, EmitStats
from gedcom2dot.labels import DEFAULT_TITLES
from gedcom2dot.loader import iter_field_events, tokenize_file
from gedcom2dot.marking import NoRoot, RelevanceMarker
from gedcom2dot.store import EntityStore, StoreBuilder


@dataclass
class ConversionResult:
    store: EntityStore
    dot: str
    stats: EmitStats


class Pipeline:
    """
    Orchestrates load -> mark -> export.
    No business logic lives here.
    """

    def __init__(self, context: RunContext):
        self.ctx = context
        self.log = context.logger

    def load_store(self) -> EntityStore:
        path = self.ctx.input_path
        if not path:
            raise MissingInputError("Please specify the name of a GEDCOM file.")
        if not Path(path).is_file():
            raise MissingInputError(f"GEDCOM file not found: {path}")

        self.log.info(f"Loading GEDCOM: {path}")
        builder = StoreBuilder(premark=isinstance(self.ctx.root, NoRoot))
        store = builder.feed(iter_field_events(tokenize_file(path)))

        self.ctx.stats["people"] = len(store.people)
        self.ctx.stats["families"] = len(store.families)
        self.ctx.stats["skipped_records"] = builder.skipped
        self.log.info(f"Found {len(store.people)} people and {len(store.families)} families")
        return store

    def mark(self, store: EntityStore) -> RelevanceMarker:
        if self.ctx.use_initials:
            self.log.debug("--initials is reserved and has no effect")

        marker = RelevanceMarker(store, self.ctx.policy)
        marker.mark(self.ctx.root)

        counts = store.counts()
        self.ctx.stats["marked_people"] = counts["marked_people"]
        self.ctx.stats["marked_families"] = counts["marked_families"]
        return marker

    def exporter(self, store: EntityStore) -> DotExporter:
        labels = getattr(self.ctx.config, "labels", None) or {}
        titles: List[str] = labels.get("titles") or list(DEFAULT_TITLES)
        return DotExporter(
            store,
            self.ctx.root,
            style=DotStyle.from_config(self.ctx.config),
            titles=titles,
        )

    def run(self) -> ConversionResult:
        self.log.info("Pipeline starting")

        try:
            store = self.load_store()
            self.mark(store)

            self.log.info("Exporting...")
            exporter = self.exporter(store)
            dot = exporter.render()
        except Gedcom2DotError:
            raise
        except Exception:
            self.log.exception("Pipeline execution failed")
            raise

        stats = exporter.stats
        self.ctx.stats["nodes"] = stats.nodes
        self.ctx.stats["edges"] = stats.edges
        self.log.info(
            "Rendered %d nodes and %d edges (%d spouse nodes)",
            stats.nodes,
            stats.edges,
            stats.spouse_nodes,
        )
        self.log.info("Pipeline completed successfully")
        return ConversionResult(store=store, dot=dot, stats=stats)
