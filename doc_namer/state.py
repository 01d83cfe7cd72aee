from doc_namer.schemas.rules import Rule


class AppState:
    rules: tuple[Rule, ...] | None = None


global_state = AppState()
