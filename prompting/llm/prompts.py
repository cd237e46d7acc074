
CREATE_PLAN_PROMPT = """Create a plan to fulfill the following objective: {objective}. Invoke the function '__data_plan' with the steps of the plan.
Some objectives are too small in scope already to further break them down into steps. In that case, invoke the function named '__data_atomic'."""


PLAN_ROOT_PROMPT = "I need help creating a plan for the following objective: {objective}"


PLAN_NESTED_PROMPT = """I am in the process of completing the following objectives. They're ordered in a list, and each objective is a part of the plan to complete the immediately previous objective in the list.:
{ancestors}

Help me create a plan for the objective I'm currently focusing on: {objective}"""


REACT_SYSTEM = """You run in a loop of Thought, Action, PAUSE, Observation.
At the end of the loop you output an Answer
Use Thought to describe your thoughts about the question you have been asked.
Use Action to run one of the actions available to you - then return PAUSE.
Observation will be the result of running those actions.

Your available actions are given in the 'functions' parameter.

Example session:

Question: What is the capital of France?
Thought: I should look up France on Google
Action: google: France
PAUSE

You will be called again with this:

Observation: France is a country. The capital is Paris.

You then output:

Answer: The capital of France is Paris"""
