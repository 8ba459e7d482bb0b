"""
EventBridge schedule for the indexer.

The indexer handles scheduled CloudWatch events: each run lists the posts in
the bucket and rebuilds the index on the shared filesystem.

Creates:
- EventBridge rule with the given schedule expression
- Target pointing the rule at the indexer function
- Lambda permission allowing EventBridge to invoke the indexer
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from search_infra.utils.tags import create_tags


@dataclass
class ScheduleOutputs:
    """Output values from indexer schedule component."""
    rule_arn: pulumi.Output[str]
    schedule_expression: str


class IndexerScheduleComponent(pulumi.ComponentResource):
    """
    Periodic trigger for the indexer function.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        schedule_expression: str,
        function_arn: pulumi.Input[str],
        function_name: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:messaging:IndexerSchedule", name, None, opts)

        if not schedule_expression.startswith(("rate(", "cron(")):
            raise ValueError(
                f"schedule expression must be rate(...) or cron(...), got {schedule_expression!r}"
            )
        self.schedule_expression = schedule_expression

        child_opts = pulumi.ResourceOptions(parent=self)

        self.rule = aws.cloudwatch.EventRule(
            f"{name}-rule",
            description="Rebuild the search index from the posts bucket",
            schedule_expression=schedule_expression,
            tags=create_tags(environment, f"{name}-rule"),
            opts=child_opts,
        )

        self.target = aws.cloudwatch.EventTarget(
            f"{name}-target",
            rule=self.rule.name,
            arn=function_arn,
            opts=child_opts,
        )

        self.permission = aws.lambda_.Permission(
            f"{name}-invoke",
            action="lambda:InvokeFunction",
            function=function_name,
            principal="events.amazonaws.com",
            source_arn=self.rule.arn,
            opts=child_opts,
        )

        self.register_outputs({
            "rule_arn": self.rule.arn,
        })

    def get_outputs(self) -> ScheduleOutputs:
        """Get schedule output values."""
        return ScheduleOutputs(
            rule_arn=self.rule.arn,
            schedule_expression=self.schedule_expression,
        )
