"""This module provides the BastionDeployment class."""
from aws_cdk import (
    aws_ec2 as ec2,
    aws_iam as iam,
)


#
#  The bastion is the only way into the VPC, so it is placed in the public
#  subnet and carries the 'from-bastion' security group.
class BastionDeployment:
    """This class creates the bastion EC2 instance inside the supplied construct."""

    def __init__(self, construct, vpc, security_group):
        # Instance
        self.instance = ec2.BastionHostLinux(
            construct,
            "bastion",
            vpc=vpc,
            instance_name="bastion",
            instance_type=ec2.InstanceType.of(
                ec2.InstanceClass.C7I, ec2.InstanceSize.XLARGE2
            ),
            security_group=security_group,
            block_devices=[
                ec2.BlockDevice(
                    device_name="/dev/xvda",
                    volume=ec2.BlockDeviceVolume.ebs(30),
                )
            ],
        )

        # Instance Role. BastionHostLinux already attaches the SSM core policy
        self.instance.role.add_managed_policy(
            iam.ManagedPolicy.from_aws_managed_policy_name("AdministratorAccess")
        )
