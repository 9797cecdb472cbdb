"""Domain exceptions raised by the routing pipeline."""


class OrchestrationError(RuntimeError):
    """A multi-agent run aborted; no partial result is returned."""


class UnknownAgentRoleError(LookupError):
    def __init__(self, role: object):
        super().__init__(f"Agent {role} not found")
        self.role = role


class AgentCannotHandleError(ValueError):
    def __init__(self, role: object):
        super().__init__(f"Agent {role} cannot handle this ticket type")
        self.role = role
