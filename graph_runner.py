"""
CLI to load edge-list graphs and report neighbors, degrees and reachability.

Either takes a single graph file on the command line, or reads a YAML job
file listing several graphs and the start nodes to traverse from.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence
import argparse
import logging
import sys
import time

from directed_graph import DirectedGraph
from edge_list import EdgeListFormatError, load_graph_from_file
from graph import Graph
from search import ENGINES
from undirected_graph import UndirectedGraph

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Malformed runner configuration."""


@dataclass(frozen=True)
class JobConfig:
    name: str
    path: Path
    directed: bool
    algorithm: str
    starts: Sequence[str]


@dataclass(frozen=True)
class Config:
    jobs: Sequence[JobConfig]


def load_config(path: Path) -> Config:
    import yaml  # type: ignore

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    if not isinstance(data, dict) or "jobs" not in data:
        raise ConfigError(f"{path}: missing 'jobs' list")

    jobs_data = data["jobs"] or []
    if not isinstance(jobs_data, list):
        raise ConfigError(f"{path}: 'jobs' must be a list")

    jobs: List[JobConfig] = []
    for idx, job in enumerate(jobs_data):
        try:
            name = str(job.get("name", f"job{idx}"))
            graph_path = Path(job["path"])
            raw_starts = job["starts"]
        except (KeyError, TypeError, AttributeError) as exc:
            raise ConfigError(f"{path}: job {idx} is missing {exc}") from None

        if not isinstance(raw_starts, (list, tuple)):
            raise ConfigError(f"{path}: job {name!r} 'starts' must be a list")
        starts = [str(s) for s in raw_starts]

        directed = job.get("directed", True)
        if not isinstance(directed, bool):
            raise ConfigError(f"{path}: job {name!r} 'directed' must be true or false")

        algorithm = str(job.get("algorithm", "dfs")).lower()
        if algorithm not in ENGINES:
            raise ConfigError(f"{path}: job {name!r} has unknown algorithm {algorithm!r}")

        # Relative graph paths are resolved against the config file.
        if not graph_path.is_absolute():
            graph_path = path.parent / graph_path

        jobs.append(
            JobConfig(
                name=name,
                path=graph_path,
                directed=directed,
                algorithm=algorithm,
                starts=starts,
            )
        )
    return Config(jobs=jobs)


def build_graph(path: Path, directed: bool = True, name: str = "") -> Graph:
    graph: Graph = DirectedGraph(name) if directed else UndirectedGraph(name)
    load_graph_from_file(path, graph)
    return graph


def run_jobs(config_path: Path) -> List[Dict[str, object]]:
    """
    Run every job in the config and return one result row per start node.
    """
    cfg = load_config(config_path)
    start = time.time()

    results: List[Dict[str, object]] = []
    for job in cfg.jobs:
        graph = build_graph(job.path, job.directed, job.name)
        engine = ENGINES[job.algorithm]()
        for node in job.starts:
            reached = engine.reachable(graph, node)
            results.append(
                {
                    "job": job.name,
                    "algorithm": job.algorithm,
                    "start": node,
                    "reachable": sorted(reached, key=str),
                    "count": len(reached),
                }
            )
        logger.info("[run] completed job=%s starts=%d", job.name, len(job.starts))

    elapsed = time.time() - start
    logger.info("[run] completed %d jobs in %.2fs", len(cfg.jobs), elapsed)
    return results


def describe_graph(graph: Graph, starts: Sequence[str], algorithm: str = "dfs") -> str:
    engine = ENGINES[algorithm]()
    lines = [f"Graph: {graph.name}", graph.format_adj()]
    lines.append(f"Nodes in graph: {sorted(graph.get_nodes(), key=str)}")
    for node in starts:
        nbrs, _ = graph.get_neighbors(node)
        if isinstance(graph, DirectedGraph):
            deg, _ = graph.get_total_degree(node)
        else:
            deg, _ = graph.get_degree(node)  # type: ignore[attr-defined]
        reached = sorted(engine.reachable(graph, node), key=str)
        lines.append(f"{node}'s neighbors: {sorted(nbrs, key=str)}")
        lines.append(f"{node}'s degree: {deg}")
        lines.append(f"{node}'s reachable set ({algorithm}): {reached}")
    return "\n".join(lines)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("graph", nargs="?", type=Path, help="edge-list file")
    parser.add_argument("--config", type=Path, help="YAML job file")
    parser.add_argument("--undirected", action="store_true", help="treat edges as undirected")
    parser.add_argument("--start", action="append", default=[], help="start node (repeatable)")
    parser.add_argument("--algorithm", choices=sorted(ENGINES), default="dfs")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    if args.graph is None and args.config is None:
        parser.error("a graph file or --config is required")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        if args.config is not None:
            for row in run_jobs(args.config):
                print(
                    f"job={row['job']} algorithm={row['algorithm']} start={row['start']} "
                    f"count={row['count']} reachable={row['reachable']}"
                )
        if args.graph is not None:
            graph = build_graph(args.graph, not args.undirected, args.graph.name)
            print(describe_graph(graph, args.start, args.algorithm))
    except (OSError, UnicodeDecodeError, EdgeListFormatError, ConfigError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
