from rich import print
from rich.text import Text

from tuidiagrams import BarChart, Flowchart, SequenceDiagram, Shape


def main() -> None:
    flow = Flowchart("TD")
    flow.add_node("start", "Start", Shape.ROUNDED).add_node("check", "Has Data?", Shape.DIAMOND)
    flow.add_node("process", "Process").add_node("end", "End", Shape.ROUNDED)
    flow.add_edge("start", "check").add_edge("check", "process", "yes").add_edge("check", "end", "no")
    flow.add_edge("process", "end")
    print(Text(flow.render()))

    seq = SequenceDiagram().add_actor("user", "User").add_actor("api", "API")
    seq.add_message("user", "api", "GET /items").add_message("api", "user", "200 OK", "return")
    print(Text(seq.render()))

    chart = BarChart("Requests", "horizontal", width=30)
    chart.add_bar_with_color("GET", 120, "\x1b[32m").add_bar("POST", 45).add_bar("DELETE", 7.5)
    print(Text.from_ansi(chart.render()))


if __name__ == "__main__":
    main()
