"""
Command line entry point for the S3 file resource.
"""
import argparse
import os
import sys
from typing import List, Optional

from loguru import logger

from .exceptions import S3ResourceError
from .models.data_models import DesiredState, ResourceSpec
from .services.config_resolver import ConfigResolver, YamlConfigFile
from .services.reconciler import Reconciler


def setup_logging(debug: bool = False):
    """Configure logging for the command line tool."""
    # Remove default logger
    logger.remove()
    
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level="DEBUG" if debug else "INFO"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='s3-resource',
        description='Keep a local file converged with an object in an S3-compatible bucket.',
        epilog='ENVIRONMENT VARIABLES: AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY, AWS_REGION, '
               'S3_ENDPOINT and S3_RESOURCE_CONFIG provide defaults for the matching options. '
               'When the options do not form a complete configuration, aws_config.yaml next '
               'to the --config file is used instead.'
    )
    parser.add_argument('command', choices=[state.value for state in DesiredState] + ['exists'],
                        help='desired state to converge to, or "exists" to check the local path')
    parser.add_argument('--path', required=True, help='absolute path of the local file')
    parser.add_argument('--source', help='object location as /bucket/path/to/object')
    parser.add_argument('--access-key-id', default=os.getenv('AWS_ACCESS_KEY_ID'))
    parser.add_argument('--secret-access-key', default=os.getenv('AWS_SECRET_ACCESS_KEY'))
    parser.add_argument('--region', default=os.getenv('AWS_REGION'))
    parser.add_argument('--endpoint', default=os.getenv('S3_ENDPOINT'),
                        help='URL of an S3-compatible service')
    parser.add_argument('--ssl-verify-peer', action=argparse.BooleanOptionalAction, default=None,
                        help='verify the TLS certificate of --endpoint')
    parser.add_argument('--force-path-style', action=argparse.BooleanOptionalAction, default=None,
                        help='keep the bucket name in the request path')
    parser.add_argument('--config', default=os.getenv('S3_RESOURCE_CONFIG'),
                        help='main agent configuration file; aws_config.yaml is looked up beside it')
    parser.add_argument('--debug', action='store_true', help='enable debug logging')
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """
    Run one command and return the process exit code.
    
    Args:
        argv: Command line arguments without the program name
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug)
    
    if args.command != 'exists' and not args.source:
        parser.error(f"--source is required for '{args.command}'")
    
    try:
        spec = ResourceSpec(
            path=args.path,
            source=args.source or '',
            access_key_id=args.access_key_id,
            secret_access_key=args.secret_access_key,
            region=args.region,
            endpoint=args.endpoint,
            ssl_verify_peer=args.ssl_verify_peer,
            force_path_style=args.force_path_style,
            ensure=DesiredState.PRESENT if args.command == 'exists' else args.command
        )
        
        fallback = YamlConfigFile.beside(args.config) if args.config else None
        reconciler = Reconciler(spec, resolver=ConfigResolver(fallback))
        
        if args.command == 'exists':
            exists = reconciler.exists()
            logger.info(f"{spec.path} {'exists' if exists else 'does not exist'}")
            return 0 if exists else 1
        
        action = reconciler.apply()
        logger.info(f"{spec.path}: {action.value}")
        return 0
        
    except KeyboardInterrupt:
        logger.info("Received interrupt signal, shutting down gracefully")
        return 1
    except (S3ResourceError, OSError, ValueError) as e:
        logger.error(f"Command failed: {e}")
        return 1


def main():
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
