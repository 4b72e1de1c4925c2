"""This module provides the LearningStack class."""
from aws_cdk import (
    Stack,
    CfnOutput,
    RemovalPolicy,
    aws_ec2 as ec2,
    aws_s3 as s3,
)
from constructs import Construct
from learning_cdk_stack import (
    bastion_deployment as bastionDepl,
    bucket_naming,
)


#
#  This is our MAIN Entry Point.  We are called by app.py
class LearningStack(Stack):
    """This class creates a single-subnet VPC, a bastion-access pair of
    security groups, a self-cleaning bucket and the bastion host itself."""

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        #
        #  1/ The VPC. One AZ, one public subnet, no public IPs handed out
        # =====================================================================
        self.vpc = self.create_vpc()

        #
        #  2/ The security groups
        #  -  'from-bastion' is worn by the bastion and has no ingress at all
        #  -  'allow-from-bastion' is worn by anything the bastion may reach
        #     and only accepts ssh from members of 'from-bastion'
        # =====================================================================
        self.bastion_security_group = ec2.SecurityGroup(
            self,
            "from-bastion",
            security_group_name="from-bastion",
            vpc=self.vpc,
        )

        self.internal_security_group = ec2.SecurityGroup(
            self,
            "allow-from-bastion",
            security_group_name="allow-from-bastion",
            vpc=self.vpc,
        )

        self.internal_security_group.add_ingress_rule(
            self.bastion_security_group,
            ec2.Port.tcp(22),
        )

        #
        #  3/ The bucket. Destroyed along with its contents on 'cdk destroy'
        # =====================================================================
        self.bucket = s3.Bucket(
            self,
            "bucket",
            bucket_name=bucket_naming.bucket_name(),
            removal_policy=RemovalPolicy.DESTROY,
            auto_delete_objects=True,
        )
        CfnOutput(self, "BucketName", value=self.bucket.bucket_name)

        #
        #  4/ The bastion EC2 instance
        # =====================================================================
        bastion_deployment = bastionDepl.BastionDeployment(
            self, self.vpc, self.bastion_security_group
        )
        self.bastion = bastion_deployment.instance
        CfnOutput(
            self, "BastionInstanceId", value=self.bastion.instance_id
        )
        CfnOutput(
            self, "BastionPrivateIp", value=self.bastion.instance_private_ip
        )

    #
    #   create the VPC
    # =========================================================================
    def create_vpc(self):
        """create a vpc with a single public /24 subnet in one AZ"""
        return ec2.Vpc(
            self,
            "Vpc",
            ip_addresses=ec2.IpAddresses.cidr("10.0.0.0/16"),
            max_azs=1,
            subnet_configuration=[
                ec2.SubnetConfiguration(
                    cidr_mask=24,
                    name="Public",
                    subnet_type=ec2.SubnetType.PUBLIC,
                    map_public_ip_on_launch=False,
                )
            ],
        )
