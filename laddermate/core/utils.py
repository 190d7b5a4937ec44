import logging

_log = logging.getLogger(__name__)


def setup_logging(level="INFO"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def format_score(score, MATE_SCORE):
    if score is None:
        return "-"
    if abs(score) > MATE_SCORE - 100:
        mate_in = (MATE_SCORE - abs(score) + 1) // 2
        return f"mate {mate_in if score > 0 else -mate_in}"
    return f"units {score}"


def log_search_info(difficulty, depth, move, score, nodes, evaluations, elapsed, MATE_SCORE):
    move_str = move.uci() if move else "-"
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    _log.debug(
        "difficulty %s depth %s move %s score %s nodes %d evals %d nps %d time %dms",
        difficulty.label, depth if depth is not None else "-", move_str,
        format_score(score, MATE_SCORE), nodes, evaluations, nps, int(elapsed * 1000),
    )
