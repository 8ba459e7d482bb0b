"""
Function URL Component for the searcher.

The searcher answers `GET ?q=<query>` with the ids of the best matching posts.
A function URL is the smallest way to reach it over HTTPS: no API Gateway,
no VPC Link. The URL is public (auth type NONE), so it is opt-in.

A public URL needs two resource-policy statements: `lambda:InvokeFunctionUrl`
and `lambda:InvokeFunction` restricted to calls made through the URL. With
only the first, the URL answers 403.

CORS only allows cross-origin GET from browsers; the URL itself passes every
HTTP method through to the function.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws


@dataclass
class FunctionUrlOutputs:
    """Output values from function URL component."""
    url: pulumi.Output[str]


class FunctionUrlComponent(pulumi.ComponentResource):
    """
    Public HTTPS endpoint in front of a Lambda function.
    """

    def __init__(
        self,
        name: str,
        function_name: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:edge:FunctionUrl", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.function_url = aws.lambda_.FunctionUrl(
            f"{name}-url",
            function_name=function_name,
            authorization_type="NONE",
            cors=aws.lambda_.FunctionUrlCorsArgs(
                allow_methods=["GET"],
                allow_origins=["*"],
            ),
            opts=child_opts,
        )

        self.url_permission = aws.lambda_.Permission(
            f"{name}-url-invoke",
            action="lambda:InvokeFunctionUrl",
            function=function_name,
            principal="*",
            function_url_auth_type="NONE",
            opts=child_opts,
        )

        self.invoke_permission = aws.lambda_.Permission(
            f"{name}-url-invoke-function",
            action="lambda:InvokeFunction",
            function=function_name,
            principal="*",
            invoked_via_function_url=True,
            opts=child_opts,
        )

        self.register_outputs({
            "url": self.function_url.function_url,
        })

    def get_outputs(self) -> FunctionUrlOutputs:
        """Get function URL output values."""
        return FunctionUrlOutputs(url=self.function_url.function_url)
