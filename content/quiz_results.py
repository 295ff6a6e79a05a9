QUIZ_RESULTS = [
  {
    "_id": "r-start-coding",
    "resultCategory": "Start Coding Now",
    "resultTitle": "START CODING NOW",
    "shortDescription": "You already think in steps and you tolerate being stuck. Syntax is the only thing missing.",
    "guidanceText": (
      "Your answers show the habits that matter most: you decompose problems, you keep going when progress is slow "
      "and you can take criticism.\n\n"
      "Pick one general-purpose language and build small, finished projects. Resist the urge to collect tutorials. "
      "Ship something every week and read other people's code."
    ),
    "recommendationTitle": "A project-first introduction to Python",
    "recommendationUrl": "https://docs.python.org/3/tutorial/",
  },
  {
    "_id": "r-tech-thinking",
    "resultCategory": "Learn Tech Thinking First",
    "resultTitle": "LEARN TECH THINKING FIRST",
    "shortDescription": "You are curious about how things work, but your mental model of software is still built on tools and trends.",
    "guidanceText": (
      "Before you pick a language, spend a few weeks on structured thinking: how data flows through a system, "
      "how a big problem becomes small ones, how to describe a process precisely.\n\n"
      "Code written without that foundation tends to be copied rather than understood. Once the thinking is in place, "
      "the syntax takes days instead of months."
    ),
    "recommendationTitle": "Computational thinking fundamentals",
    "recommendationUrl": "https://cs50.harvard.edu/x/",
  },
  {
    "_id": "r-not-starting-point",
    "resultCategory": "Coding Isn't the Right Starting Point",
    "resultTitle": "CODING ISN'T THE RIGHT STARTING POINT",
    "shortDescription": "Right now your expectations and your learning habits point away from programming.",
    "guidanceText": (
      "This is not a verdict on your intelligence. Your answers suggest you are looking for a quick payoff and clear "
      "instructions, and programming rarely offers either in the first months.\n\n"
      "Work on the underlying habits first: commit to one hard thing for a month, and notice how you react when it "
      "does not go well. Retake the assessment after that."
    ),
    "recommendationTitle": "",
    "recommendationUrl": "",
  },
]
