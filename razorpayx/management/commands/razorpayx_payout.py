"""
Management command to create, list, fetch, and cancel RazorpayX payouts.
"""

from django.core.management.base import BaseCommand, CommandError

from razorpayx.client import RazorpayX
from razorpayx.config import config
from razorpayx.constants import Currency, FundAccountType, PayoutMode, PayoutPurpose, PayoutStatus
from razorpayx.exceptions import RazorpayXException
from razorpayx.utils.formatters import format_currency


class Command(BaseCommand):
    help = 'Create, list, fetch, or cancel RazorpayX payouts'

    def add_arguments(self, parser):
        action = parser.add_mutually_exclusive_group()
        action.add_argument(
            '--list',
            action='store_true',
            help='List payouts for the source account'
        )
        action.add_argument(
            '--get',
            metavar='PAYOUT_ID',
            help='Fetch a single payout'
        )
        action.add_argument(
            '--cancel',
            metavar='PAYOUT_ID',
            help='Cancel a queued payout'
        )

        parser.add_argument(
            '--account',
            type=str,
            help='Source account number (default: RAZORPAYX_ACCOUNT_NUMBER)'
        )
        parser.add_argument(
            '--status',
            type=str,
            choices=[s.value for s in PayoutStatus],
            help='Filter listed payouts by status'
        )
        parser.add_argument(
            '--count',
            type=int,
            help='Number of payouts to list'
        )
        parser.add_argument(
            '--skip',
            type=int,
            help='Number of payouts to skip when listing'
        )

        parser.add_argument(
            '--amount',
            type=int,
            help='Payout amount in paise'
        )
        parser.add_argument(
            '--mode',
            type=str,
            choices=[m.value for m in PayoutMode],
            help='Transfer mode (also filters --list)'
        )
        destination = parser.add_mutually_exclusive_group()
        destination.add_argument(
            '--fund-account-id',
            type=str,
            help='Existing fund account to pay'
        )
        destination.add_argument(
            '--vpa',
            type=str,
            help='UPI address to pay (requires --contact-name)'
        )
        parser.add_argument(
            '--contact-name',
            type=str,
            help='Contact name for an inline VPA fund account'
        )
        parser.add_argument(
            '--purpose',
            type=str,
            default=PayoutPurpose.PAYOUT.value,
            help='Payout purpose, e.g. ' + ', '.join(p.value for p in PayoutPurpose)
        )
        parser.add_argument(
            '--reference',
            type=str,
            help='Reference id stored with the payout'
        )
        parser.add_argument(
            '--narration',
            type=str,
            help='Narration shown on the beneficiary statement'
        )
        parser.add_argument(
            '--queue-if-low-balance',
            action='store_true',
            help='Queue the payout instead of failing on low balance'
        )
        parser.add_argument(
            '--idempotency-key',
            type=str,
            help='Value for the X-Payout-Idempotency header'
        )

    def handle(self, *args, **options):
        try:
            with RazorpayX() as rpx:
                if options['list']:
                    self._list(rpx, options)
                elif options['get']:
                    payout = rpx.payouts.get(options['get'])
                    self._write_payout(payout)
                elif options['cancel']:
                    rpx.payouts.cancel(options['cancel'])
                    self.stdout.write(self.style.SUCCESS(f"Payout {options['cancel']} cancelled"))
                else:
                    self._create(rpx, options)
        except RazorpayXException as e:
            raise CommandError(f'RazorpayX request failed: {e.message}')

    def _account_number(self, options):
        account_number = options.get('account') or config.account_number
        if not account_number:
            raise CommandError('Provide --account or set RAZORPAYX_ACCOUNT_NUMBER')
        return account_number

    def _list(self, rpx, options):
        filters = {
            key: options[key]
            for key in ('status', 'mode', 'count', 'skip')
            if options.get(key) is not None
        }
        collection = rpx.payouts.get_all(self._account_number(options), filters)

        self.stdout.write(self.style.SUCCESS(f"{collection['count']} payout(s)"))
        for payout in collection['items']:
            self.stdout.write(
                f"  {payout['id']}  {payout['status']:<10}  {payout['mode']:<4}  "
                f"{format_currency(payout['amount'], payout['currency'])}"
            )

    def _create(self, rpx, options):
        if options.get('amount') is None or not options.get('mode'):
            raise CommandError('Creating a payout requires --amount and --mode')

        payout_info = {
            'account_number': self._account_number(options),
            'amount': options['amount'],
            'currency': Currency.INR.value,
            'mode': options['mode'],
            'purpose': options['purpose'],
        }
        if options.get('fund_account_id'):
            payout_info['fund_account_id'] = options['fund_account_id']
        elif options.get('vpa'):
            if not options.get('contact_name'):
                raise CommandError('--vpa requires --contact-name')
            payout_info['fund_account'] = {
                'account_type': FundAccountType.VPA.value,
                'vpa': {'address': options['vpa']},
                'contact': {'name': options['contact_name']},
            }
        else:
            raise CommandError('Provide --fund-account-id or --vpa')

        for option, key in (('reference', 'reference_id'), ('narration', 'narration')):
            if options.get(option):
                payout_info[key] = options[option]
        if options['queue_if_low_balance']:
            payout_info['queue_if_low_balance'] = True

        payout = rpx.payouts.create(payout_info, idempotency_key=options.get('idempotency_key'))
        self.stdout.write(self.style.SUCCESS('Payout created'))
        self._write_payout(payout)

    def _write_payout(self, payout):
        self.stdout.write(f"  Payout ID: {payout['id']}")
        self.stdout.write(f"  Status: {payout['status']}")
        self.stdout.write(f"  Mode: {payout['mode']}")
        self.stdout.write(f"  Amount: {format_currency(payout['amount'], payout['currency'])}")
        if payout.get('fees') is not None:
            self.stdout.write(f"  Fees: {format_currency(payout['fees'], payout['currency'])}")
        if payout.get('utr'):
            self.stdout.write(f"  UTR: {payout['utr']}")
        details = payout.get('status_details') or {}
        if details.get('description'):
            self.stdout.write(self.style.WARNING(f"  {details['description']}"))
