import timeotp


def main() -> int:
    duration = timeotp.DEFAULT_INTERVAL
    try:
        secret = timeotp.generate_secret()
        code = timeotp.totp(secret, duration)
    except timeotp.OTPError as exc:
        print("Error generating TOTP:", exc)
        return 0
    print("Generated TOTP Code:", code)
    print("Verify:", timeotp.validate(secret, duration, code))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
