def format_score(score, win_score, loss_score, draw_score):
        if score is None:
                return "none"
        if score == draw_score or score == -draw_score:
                return "draw"
        if score >= win_score - 64:
                return f"win {score - win_score}"
        if score <= loss_score + 64:
                return f"loss {score - loss_score}"
        return f"cp {score}"


def print_info(d, score, nodes, elapsed, best, WIN_SCORE, LOSS_SCORE, DRAW_SCORE):
        best_str = str(best) if best else "-"
        nps = int(nodes / elapsed) if elapsed > 0 else 0
        score_str = format_score(score, WIN_SCORE, LOSS_SCORE, DRAW_SCORE)

        print(f"info depth {d} score {score_str} nodes {nodes} nps {nps} time {int(elapsed * 1000)} pv {best_str}")
