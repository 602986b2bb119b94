"""Mapa de transições do envio ao CRM.

O mapa é montado a partir do caminho feliz (uma etapa leva à seguinte) e
da saída de falha de cada etapa. A saída muda de FAILED para
PARTIAL_FAILURE assim que o lead passa a existir no CRM.
"""

from fsm.states.sync import TERMINAL_STATES, SyncState

TransitionMap = dict[SyncState, frozenset[SyncState]]

_HAPPY_PATH: tuple[SyncState, ...] = (
    SyncState.IDLE,
    SyncState.LEAD_SUBMITTING,
    SyncState.LEAD_ID_RESOLVING,
    SyncState.PERSON_SUBMITTING,
    SyncState.DONE,
)

# IDLE não tem saída de falha: nada foi chamado ainda
_FAILURE_EXITS: dict[SyncState, SyncState] = {
    SyncState.LEAD_SUBMITTING: SyncState.FAILED,
    SyncState.LEAD_ID_RESOLVING: SyncState.PARTIAL_FAILURE,
    SyncState.PERSON_SUBMITTING: SyncState.PARTIAL_FAILURE,
}


def _build_transition_map() -> TransitionMap:
    targets: dict[SyncState, set[SyncState]] = {state: set() for state in SyncState}
    for step, next_step in zip(_HAPPY_PATH, _HAPPY_PATH[1:]):
        targets[step].add(next_step)
    for step, failure in _FAILURE_EXITS.items():
        targets[step].add(failure)
    return {state: frozenset(allowed) for state, allowed in targets.items()}


VALID_TRANSITIONS: TransitionMap = _build_transition_map()


def get_valid_targets(state: SyncState) -> frozenset[SyncState]:
    """Destinos permitidos a partir de `state` (vazio para terminais)."""
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: SyncState, to_state: SyncState) -> bool:
    return to_state in get_valid_targets(from_state)


def validate_transition_map(transitions: TransitionMap | None = None) -> list[str]:
    """Confere a integridade de um mapa de transições.

    Regras:
        - todo SyncState aparece como chave
        - terminais não têm saída
        - todo estado não-terminal chega a algum terminal
        - FAILED nunca é alcançável depois que o lead foi criado

    Args:
        transitions: Mapa a validar (padrão: VALID_TRANSITIONS).

    Returns:
        Problemas encontrados; lista vazia se o mapa é íntegro.
    """
    graph = VALID_TRANSITIONS if transitions is None else transitions
    problems = [
        f"{state.name} sem entrada no mapa" for state in SyncState if state not in graph
    ]

    for state in sorted(TERMINAL_STATES):
        exits = graph.get(state, frozenset())
        if exits:
            names = ", ".join(sorted(s.name for s in exits))
            problems.append(f"{state.name} é terminal mas sai para {names}")

    for state in SyncState:
        if state in TERMINAL_STATES:
            continue
        if not _reachable_from(graph, state) & TERMINAL_STATES:
            problems.append(f"{state.name} não alcança estado terminal")

    # LEAD_ID_RESOLVING é a primeira etapa com lead existente
    if SyncState.FAILED in _reachable_from(graph, SyncState.LEAD_ID_RESOLVING):
        problems.append("FAILED alcançável depois da criação do lead")

    return problems


def _reachable_from(graph: TransitionMap, start: SyncState) -> set[SyncState]:
    seen: set[SyncState] = set()
    frontier = list(graph.get(start, frozenset()))
    while frontier:
        state = frontier.pop()
        if state not in seen:
            seen.add(state)
            frontier.extend(graph.get(state, frozenset()))
    return seen


__all__ = [
    "VALID_TRANSITIONS",
    "TransitionMap",
    "get_valid_targets",
    "is_transition_valid",
    "validate_transition_map",
]
