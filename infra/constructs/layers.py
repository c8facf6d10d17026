import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

LAYER_SOURCE_PATH = "layers/common_layer"

# 先に見つかったインストーラを使う
INSTALLERS: tuple[tuple[str, ...], ...] = (
    ("uv", "pip", "install", "--quiet", "-r"),
    ("pip", "install", "--quiet", "-r"),
)


@jsii.implements(ILocalBundling)
class RequirementsLocalBundling:
    """requirements.txt の依存をローカルでレイヤー用ディレクトリに入れる

    どのインストーラも使えなければ Docker でのバンドリングに任せる。
    """

    def __init__(self, source_path: str) -> None:
        self.source_path = Path(source_path)

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        del options
        requirements = self.source_path / "requirements.txt"
        if not requirements.exists():
            logger.warning("requirements.txt not found: %s", requirements)
            return False

        target = Path(output_dir) / "python"
        for installer in INSTALLERS:
            command = [*installer, str(requirements), "--target", str(target)]
            try:
                subprocess.run(command, check=True)
            except FileNotFoundError:
                logger.debug("%s not found", installer[0])
                continue
            except subprocess.CalledProcessError as e:
                logger.debug("%s install failed: %s", installer[0], e)
                continue
            logger.info("Bundled %s with %s", requirements, installer[0])
            return True

        logger.warning("Local bundling failed, falling back to Docker")
        return False


class Layers(Construct):
    """Lambda Layers Construct"""

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                LAYER_SOURCE_PATH,
                bundling=BundlingOptions(
                    image=_lambda.Runtime.PYTHON_3_14.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                    local=RequirementsLocalBundling(LAYER_SOURCE_PATH),
                ),
            ),
            compatible_runtimes=[_lambda.Runtime.PYTHON_3_14],
            description="pydantic / powertools for tour booking functions",
        )
