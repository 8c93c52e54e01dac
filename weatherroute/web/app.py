"""
FastAPI web interface for the weather route planner.

JSON API over one RouteSession: edit nodes and edges, query routes.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..pathfinding import (
    DuplicateNodeError,
    EdgeNotFoundError,
    GraphError,
    InvalidEdgeError,
    InvalidImpactError,
    InvalidNodeError,
    NodeNotFoundError,
)
from ..pathfinding.astar import format_route
from ..session import RouteSession

logger = logging.getLogger(__name__)


class NodeModel(BaseModel):
    """A node with its weather impact."""

    name: str = Field(min_length=1)
    x: float
    y: float
    impact: float = 0.0


class ImpactRequest(BaseModel):
    impact: float


class EdgeModel(BaseModel):
    """An undirected edge."""

    from_node: str
    to_node: str
    cost: float


class PathRequest(BaseModel):
    """Route query."""

    start: str
    goal: str
    via: list[str] = Field(default_factory=list)


class SegmentDisplay(BaseModel):
    """Display info for a route segment."""

    from_node: str
    to_node: str
    distance: float
    impact: float
    cost: float


class PathResponse(BaseModel):
    """Response model for route queries."""

    found: bool
    route: list[str] | None = None
    route_text: str | None = None
    total_distance: float = 0.0
    total_impact: float = 0.0
    total_cost: float = 0.0
    segments: list[SegmentDisplay] = Field(default_factory=list)
    message: str | None = None


def _status_for(exc: GraphError) -> int:
    if isinstance(exc, DuplicateNodeError):
        return 409
    if isinstance(exc, (NodeNotFoundError, EdgeNotFoundError)):
        return 404
    if isinstance(exc, (InvalidEdgeError, InvalidImpactError, InvalidNodeError)):
        return 422
    return 400


def create_app(session: RouteSession | None = None) -> FastAPI:
    """
    Build the API around a session.

    Args:
        session: Session to serve; defaults to the demo network
    """
    app = FastAPI(
        title="Weather Route Planner",
        description="A* routes with per-node weather impact",
        version="0.1.0",
    )
    app.state.session = session if session is not None else RouteSession.demo()

    def get_session(request: Request) -> RouteSession:
        return request.app.state.session

    @app.exception_handler(GraphError)
    async def graph_error_handler(request: Request, exc: GraphError):
        logger.debug("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=_status_for(exc), content={"detail": str(exc)})

    @app.get("/api/nodes", response_model=list[NodeModel])
    def list_nodes(request: Request) -> list[NodeModel]:
        """List nodes with coordinates and weather impact."""
        return [
            NodeModel(name=n.name, x=n.x, y=n.y, impact=n.impact)
            for n in get_session(request).describe_nodes()
        ]

    @app.post("/api/nodes", response_model=NodeModel, status_code=201)
    def add_node(node: NodeModel, request: Request) -> NodeModel:
        info = get_session(request).add_node(node.name, node.x, node.y, node.impact)
        return NodeModel(name=info.name, x=info.x, y=info.y, impact=info.impact)

    @app.delete("/api/nodes/{name}", status_code=204)
    def remove_node(name: str, request: Request) -> None:
        """Remove a node, its edges and its weather impact."""
        get_session(request).remove_node(name)

    @app.put("/api/nodes/{name}/impact", status_code=204)
    def set_impact(name: str, body: ImpactRequest, request: Request) -> None:
        get_session(request).set_impact(name, body.impact)

    @app.get("/api/edges", response_model=list[EdgeModel])
    def list_edges(request: Request) -> list[EdgeModel]:
        """List every edge once."""
        return [
            EdgeModel(from_node=a, to_node=b, cost=cost)
            for a, b, cost in get_session(request).describe_edges()
        ]

    @app.post("/api/edges", response_model=EdgeModel, status_code=201)
    def add_edge(edge: EdgeModel, request: Request) -> EdgeModel:
        get_session(request).add_edge(edge.from_node, edge.to_node, edge.cost)
        return edge

    @app.delete("/api/edges/{from_node}/{to_node}", status_code=204)
    def remove_edge(from_node: str, to_node: str, request: Request) -> None:
        get_session(request).remove_edge(from_node, to_node)

    @app.post("/api/path", response_model=PathResponse)
    def find_path(query: PathRequest, request: Request) -> PathResponse:
        """Find the cheapest route, with per-segment breakdown."""
        result = get_session(request).find_path(query.start, query.goal, via=query.via)
        if not result.found:
            return PathResponse(
                found=False,
                message=f"No path found between {query.start} and {query.goal}",
            )
        return PathResponse(
            found=True,
            route=result.path,
            route_text=format_route(result.path),
            total_distance=result.total_distance,
            total_impact=result.total_impact,
            total_cost=result.total_cost,
            segments=[
                SegmentDisplay(
                    from_node=seg.from_node,
                    to_node=seg.to_node,
                    distance=seg.distance,
                    impact=seg.impact,
                    cost=seg.cost,
                )
                for seg in result.segments
            ],
        )

    @app.post("/api/reset", status_code=204)
    def reset(request: Request) -> None:
        """Remove every node and edge."""
        get_session(request).reset()

    @app.get("/health")
    def health(request: Request):
        """Health check endpoint."""
        session = get_session(request)
        return {
            "status": "ok",
            "nodes": len(session),
            "edges": len(session.describe_edges()),
        }

    return app


app = create_app()
