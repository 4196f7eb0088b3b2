"""
Gradio UI for SubnetDrill.
"""

import gradio as gr
from .checker import FIELD_LABELS, FieldSet
from .exercise import DIFFICULTIES, GenerationExhausted
from .session import PracticeSession
from .tools import check_subnet_answer, convert_address, generate_vlsm_exercise

ANSWER_HEADERS = ["Subnet", "Hosts"] + list(FIELD_LABELS.values())


def _streak_text(session: PracticeSession) -> str:
    return f"Streak: **{session.streak}** | Best: **{session.best_streak}**"


def new_question(difficulty: str, session: PracticeSession):
    """
    Start a new exercise.

    Returns:
        tuple: (question markdown, empty answer table, result markdown, session)
    """
    session = session or PracticeSession()
    try:
        puzzle = session.new_question(difficulty)
    except GenerationExhausted as e:
        return f"❌ Error: {e}", [], "", session

    question = (
        f"**Assigned block:** `{puzzle.base}`\n\n"
        "Requirements (largest first):\n\n"
        + "\n".join(f"- **Subnet {i}**: {h} hosts" for i, h in enumerate(puzzle.requirements, start=1))
    )
    if puzzle.difficulty == "hard":
        question += "\n\n*In VLSM, allocate address space from the largest requirement downward.*"

    rows = [
        [f"Subnet {i}", str(h)] + [""] * len(FIELD_LABELS)
        for i, h in enumerate(puzzle.requirements, start=1)
    ]
    return question, rows, "", session


def check_answers(table, session: PracticeSession):
    """
    Check the answer table against the current exercise.

    Returns:
        tuple: (result markdown, streak markdown, session)
    """
    session = session or PracticeSession()
    if session.puzzle is None:
        return "❌ Error: Generate an exercise first", _streak_text(session), session

    rows = []
    for row in table or []:
        answers = ["" if v is None else str(v) for v in row[2:]]
        rows.append(FieldSet(*answers[:len(FIELD_LABELS)]))

    report = session.check(rows)
    status = "\n".join(
        f"- Subnet {i}: {'✔ Correct' if ok else '✖ Incorrect'}"
        for i, ok in enumerate(report.results, start=1)
    )
    if report.all_correct:
        result = f"{status}\n\n**All subnets correct.**"
    else:
        result = f"{status}\n\n```\n" + "\n\n".join(report.explanations) + "\n```"
    return result, _streak_text(session), session


def create_interface():
    """Create the Gradio interface."""

    # Separate interfaces for MCP tools
    exercise_interface = gr.Interface(
        fn=generate_vlsm_exercise,
        api_name="generate_vlsm_exercise",
        inputs=[
            gr.Dropdown(label="Difficulty", choices=list(DIFFICULTIES), value="medium"),
            gr.Textbox(label="Seed", placeholder="optional", value="")
        ],
        outputs=gr.Textbox(label="Exercise", lines=20, interactive=False),
        title="VLSM Exercise Generator",
        description="Generate a random VLSM exercise with its solution"
    )

    check_interface = gr.Interface(
        fn=check_subnet_answer,
        api_name="check_subnet_answer",
        inputs=[
            gr.Textbox(label="Subnet", placeholder="192.168.1.64/27"),
            gr.Textbox(label="Mask", placeholder="255.255.255.224"),
            gr.Textbox(label="CIDR", placeholder="/27"),
            gr.Textbox(label="Network ID", placeholder="192.168.1.64"),
            gr.Textbox(label="Broadcast", placeholder="192.168.1.95"),
            gr.Textbox(label="First usable (Gateway)", placeholder="192.168.1.65"),
            gr.Textbox(label="Last usable", placeholder="192.168.1.94")
        ],
        outputs=gr.Textbox(label="Check Result"),
        title="Answer Checker",
        description="Check one subnet answer, in decimal or binary notation"
    )

    convert_interface = gr.Interface(
        fn=convert_address,
        api_name="convert_address",
        inputs=gr.Textbox(label="IP Address", placeholder="192.168.1.10"),
        outputs=gr.Textbox(label="Conversion Result"),
        title="Binary / Decimal",
        description="Convert an IPv4 address between decimal and binary notation"
    )

    with gr.Blocks() as combined_app:
        gr.Markdown("""
        **SubnetDrill** trains VLSM subnetting. Pick a difficulty, generate an exercise
        and fill in mask, CIDR, network ID, broadcast and usable range for every subnet.
        Addresses may be written in decimal or binary notation.
        """)

        with gr.Tabs():
            with gr.Tab("Practice"):
                session_state = gr.State(None)
                with gr.Row():
                    difficulty = gr.Dropdown(label="Difficulty", choices=list(DIFFICULTIES), value="easy")
                    new_btn = gr.Button("New question", variant="primary")
                question = gr.Markdown()
                answers = gr.Dataframe(
                    headers=ANSWER_HEADERS,
                    datatype="str",
                    type="array",
                    interactive=True
                )
                check_btn = gr.Button("Check")
                streak = gr.Markdown()
                result = gr.Markdown()

                new_btn.click(
                    new_question,
                    inputs=[difficulty, session_state],
                    outputs=[question, answers, result, session_state],
                    api_name=False
                )
                check_btn.click(
                    check_answers,
                    inputs=[answers, session_state],
                    outputs=[result, streak, session_state],
                    api_name=False
                )
            with gr.Tab("Exercise Generator"):
                exercise_interface.render()
            with gr.Tab("Answer Checker"):
                check_interface.render()
            with gr.Tab("Binary / Decimal"):
                convert_interface.render()

    return combined_app
