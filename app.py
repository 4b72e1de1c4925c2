""" This is the main entry module of the cdk application """
#!/usr/bin/env python3
import aws_cdk as cdk

from learning_cdk_stack.learning_env_config import get_config, stack_properties
from learning_cdk_stack.learning_stack import LearningStack


#
#  START HERE
# ==========================================================

app = cdk.App()

config = get_config(app)
print(f"learning-env value is {app.node.try_get_context(key='learning-env')}")
print(f"config value is {config}")

LearningStack(
    app,
    "LearningStack",
    # With no 'learning-env' context and no CDK_DEFAULT_* variables this
    # stack is environment-agnostic: a single synthesized template can be
    # deployed anywhere.
    # For more information, see
    #  https://docs.aws.amazon.com/cdk/latest/guide/environments.html
    **stack_properties(config),
)

app.synth()
