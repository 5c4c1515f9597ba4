import argparse
import asyncio
import sys
from solders.keypair import Keypair
from .mint import create, get, mint_to
from .utils.logging import logger
from .utils.solana import connect, parse_pubkey
from .wallet import KeypairWallet

async def run(args) -> str:
    conn = connect()
    try:
        if args.command == 'create':
            wallet = KeypairWallet.from_settings()
            authority = parse_pubkey(args.authority) if args.authority else wallet.public_key
            mint_kp = Keypair()
            sig = await create.send(conn, args.decimals, authority, wallet, mint_keypair=mint_kp)
            return f"mint {mint_kp.pubkey()} created in {sig}"
        if args.command == 'mint-to':
            wallet = KeypairWallet.from_settings()
            return await mint_to.send(conn, parse_pubkey(args.mint), parse_pubkey(args.owner), wallet, args.amount)
        if args.command == 'info':
            return (await get.info(conn, parse_pubkey(args.mint))).model_dump_json(indent=2)
        if args.command == 'supply':
            mint = parse_pubkey(args.mint)
            return str(await get.supply_raw(conn, mint) if args.raw else await get.supply(conn, mint))
        raise ValueError(f"unknown command {args.command}")
    finally:
        await conn.close()

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="splmint",
        description="Create SPL token mints and mint tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m splmint.main create --decimals 6
  python -m splmint.main mint-to --mint <MINT> --owner <OWNER> --amount 1.5
  python -m splmint.main supply --mint <MINT>
        """
    )
    sub = parser.add_subparsers(dest='command', required=True)
    p = sub.add_parser('create', help='Create a new mint paid by the configured wallet')
    p.add_argument('--decimals', type=int, default=9)
    p.add_argument('--authority', help='Mint authority (defaults to the wallet)')
    p = sub.add_parser('mint-to', help="Mint tokens to an owner's associated account")
    p.add_argument('--mint', required=True)
    p.add_argument('--owner', required=True)
    p.add_argument('--amount', required=True, help='Amount in token units, e.g. 1.5')
    p = sub.add_parser('info', help='Show mint metadata')
    p.add_argument('--mint', required=True)
    p = sub.add_parser('supply', help='Show mint supply')
    p.add_argument('--mint', required=True)
    p.add_argument('--raw', action='store_true', help='Print raw base units')
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        print(asyncio.run(run(args)))
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
