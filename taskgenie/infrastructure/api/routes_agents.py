"""Multi-agent endpoints — process, route, insights, metrics and status."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from taskgenie.application.ports.routing_result_repo import RoutingResultRepository
from taskgenie.application.use_cases.generate_insights import GenerateInsightsUseCase
from taskgenie.application.use_cases.orchestrator import AgentStatus, Orchestrator
from taskgenie.application.use_cases.process_ticket import ProcessTicketUseCase
from taskgenie.domain.agents.capabilities import AGENT_PROFILES
from taskgenie.domain.entities.agent_analysis import AgentAnalysis
from taskgenie.domain.entities.metrics import WorkflowMetrics
from taskgenie.domain.entities.routing_result import RoutingResult
from taskgenie.domain.entities.workflow import MultiAgentResponse
from taskgenie.domain.errors import (
    AgentCannotHandleError,
    OrchestrationError,
    UnknownAgentRoleError,
)
from taskgenie.infrastructure.api.dependencies import (
    get_generate_insights_uc,
    get_orchestrator,
    get_process_ticket_uc,
    get_results_repo,
)
from taskgenie.infrastructure.api.schemas import RouteTicketRequest, TicketRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/agents", tags=["agents"])


@router.post("/process-ticket")
async def process_ticket(
    body: TicketRequest,
    uc: ProcessTicketUseCase = Depends(get_process_ticket_uc),
):
    """Run a ticket through the full multi-agent workflow."""
    try:
        processed = await uc.execute(body.ticket.to_domain())
    except OrchestrationError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {
        **_storage_to_dict(processed.result_id, processed.storage_error),
        **_response_to_dict(processed.response),
    }


@router.post("/route-ticket")
async def route_ticket(
    body: RouteTicketRequest,
    orchestrator: Orchestrator = Depends(get_orchestrator),
):
    """Analyze a ticket with one specialist, skipping the workflow loop."""
    try:
        analysis = orchestrator.route_to_agent(body.ticket.to_domain(), body.target_role)
    except AgentCannotHandleError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"status": "ok", "analysis": _analysis_to_dict(analysis)}


@router.post("/comprehensive-insights")
async def comprehensive_insights(
    body: TicketRequest,
    uc: GenerateInsightsUseCase = Depends(get_generate_insights_uc),
):
    """Full workflow plus a natural-language summary of the findings."""
    try:
        report = await uc.execute(body.ticket.to_domain())
    except OrchestrationError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {
        **_storage_to_dict(report.result_id, report.storage_error),
        "summary": report.summary,
        **_response_to_dict(report.response),
    }


@router.get("/metrics")
async def workflow_metrics(orchestrator: Orchestrator = Depends(get_orchestrator)):
    return _metrics_to_dict(orchestrator.get_workflow_metrics())


@router.post("/reset-metrics")
async def reset_metrics(orchestrator: Orchestrator = Depends(get_orchestrator)):
    orchestrator.reset_metrics()
    logger.info("Workflow metrics reset")
    return {"status": "ok", "message": "Metrics reset"}


@router.get("/status")
async def all_agent_status(orchestrator: Orchestrator = Depends(get_orchestrator)):
    return {"agents": [_status_to_dict(s) for s in orchestrator.agent_statuses()]}


@router.get("/status/{role}")
async def agent_status(role: str, orchestrator: Orchestrator = Depends(get_orchestrator)):
    try:
        status = orchestrator.agent_status(role.upper())
    except UnknownAgentRoleError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _status_to_dict(status)


@router.get("/capabilities")
async def capabilities(orchestrator: Orchestrator = Depends(get_orchestrator)):
    """Static profile of every specialist plus its confidence capabilities."""
    result = {}
    for role, agent in orchestrator.registry:
        profile = AGENT_PROFILES[role]
        result[role.value] = {
            "name": profile.name,
            "description": profile.description,
            "specialties": list(profile.specialties),
            "capabilities": list(agent.capabilities),
            "tools": [tool.kind.value for tool in agent.tools],
            "confidence_threshold": profile.confidence_threshold,
            "max_processing_time_ms": profile.max_processing_time_ms,
            "priority": profile.priority,
        }
    return result


@router.get("/results/{ticket_id}")
async def latest_result(
    ticket_id: int,
    repo: RoutingResultRepository = Depends(get_results_repo),
):
    """Most recent stored routing result for a ticket."""
    result = await repo.get_latest_for_ticket(ticket_id)
    if result is None:
        raise HTTPException(status_code=404, detail=f"No routing result for ticket {ticket_id}")
    return _result_to_dict(result)


# ── Serializers ─────────────────────────────────────────────────────


def _analysis_to_dict(a: AgentAnalysis) -> dict:
    return {
        "role": a.role.value,
        "analysis": a.analysis,
        "confidence": round(a.confidence, 4),
        "recommended_actions": list(a.recommended_actions),
        "next_role": a.next_role.value if a.next_role else None,
        "priority": a.priority.value if a.priority else None,
        "estimated_time": a.estimated_time,
        "complexity": a.complexity.value if a.complexity else None,
    }


def _storage_to_dict(result_id: int | None, error: str | None) -> dict:
    # "degraded": routing succeeded but the result was not stored
    return {
        "status": "ok" if error is None else "degraded",
        "result_id": result_id,
        "storage_error": error,
    }


def _response_to_dict(r: MultiAgentResponse) -> dict:
    return {
        "ticket_id": r.ticket_id,
        "final_recommendations": list(r.final_recommendations),
        "confidence": round(r.confidence, 4),
        "processing_time_ms": round(r.processing_time_ms, 2),
        "agents_involved": [role.value for role in r.agents_involved],
        "handoff_count": r.handoff_count,
        "iterations": r.workflow.iterations,
        "handoff_reason": r.workflow.handoff_reason or None,
        "agent_analyses": [_analysis_to_dict(a) for a in r.agent_analyses],
    }


def _metrics_to_dict(m: WorkflowMetrics) -> dict:
    return {
        "total_workflows": m.total_workflows,
        "successful_workflows": m.successful_workflows,
        "average_processing_time": round(m.average_processing_time, 2),
        "handoff_count": m.handoff_count,
        "agent_utilization": {
            role.value: {
                "tasks_handled": u.tasks_handled,
                "average_confidence": round(u.average_confidence, 4),
                "success_rate": round(u.success_rate, 4),
                "average_processing_time": round(u.average_processing_time, 2),
            }
            for role, u in m.agent_utilization.items()
        },
        "last_updated": m.last_updated.isoformat(),
    }


def _status_to_dict(s: AgentStatus) -> dict:
    return {
        "role": s.role.value,
        "status": s.status,
        "tasks_handled": s.tasks_handled,
        "success_rate": round(s.success_rate, 4),
        "average_processing_time": round(s.average_processing_time, 2),
        "average_confidence": round(s.average_confidence, 4),
        "capabilities": s.capabilities,
    }


def _result_to_dict(r: RoutingResult) -> dict:
    return {
        "id": r.id,
        "ticket_id": r.ticket_id,
        "primary_role": r.primary_role.value,
        "agents_involved": [role.value for role in r.agents_involved],
        "handoff_count": r.handoff_count,
        "confidence": round(r.confidence, 4),
        "recommendations": r.recommendations,
        "processing_time_ms": round(r.processing_time_ms, 2),
        "summary": r.summary,
        "created_at": r.created_at.isoformat() if r.created_at else None,
    }
