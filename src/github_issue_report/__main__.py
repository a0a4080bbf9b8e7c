from github_issue_report.main import main

if __name__ == "__main__":
    raise SystemExit(main())
